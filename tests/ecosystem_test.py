import pytest

from trustytypes.models.ecosystem import Ecosystem
from trustytypes.models.ecosystem import ecosystem_name
from trustytypes.models.ecosystem import ECOSYSTEMS


def test_ecosystem_codes():
    assert Ecosystem.NPM == 1
    assert Ecosystem.GO == 2
    assert Ecosystem.PYPI == 3
    assert Ecosystem.MAVEN == 4
    assert Ecosystem.CRATES == 5


def test_as_string():
    assert Ecosystem.NPM.as_string() == 'npm'
    assert Ecosystem.GO.as_string() == 'Go'
    assert Ecosystem.PYPI.as_string() == 'PyPI'
    assert Ecosystem.MAVEN.as_string() == 'Maven'
    assert Ecosystem.CRATES.as_string() == 'crates'
    assert str(Ecosystem.PYPI) == 'PyPI'


def test_ecosystem_name_known_and_unknown():
    assert ecosystem_name(3) == 'PyPI'
    assert ecosystem_name(99) == ''
    assert ecosystem_name(0) == ''
    assert ecosystem_name(-1) == ''


def test_constant_names():
    assert ECOSYSTEMS['EcosystemPypi'] is Ecosystem.PYPI
    assert set(ECOSYSTEMS.values()) == set(Ecosystem)


def test_from_string():
    assert Ecosystem.from_string('pypi') is Ecosystem.PYPI
    assert Ecosystem.from_string('NPM') is Ecosystem.NPM
    assert Ecosystem.from_string('EcosystemCrates') is Ecosystem.CRATES


def test_from_string_unknown():
    with pytest.raises(ValueError, match='Unsupported ecosystem'):
        Ecosystem.from_string('rubygems')
