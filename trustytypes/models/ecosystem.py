from enum import IntEnum


class Ecosystem(IntEnum):
    """Packaging systems supported by Trusty, keyed by their API code."""
    NPM = 1
    GO = 2
    PYPI = 3
    MAVEN = 4
    CRATES = 5

    def as_string(self) -> str:
        return _DISPLAY_NAMES[self]

    def __str__(self) -> str:
        return self.as_string()

    @classmethod
    def from_string(cls, name: str) -> 'Ecosystem':
        """Resolve a display name (any case) or a constant name like `EcosystemPypi`."""
        if name in ECOSYSTEMS:
            return ECOSYSTEMS[name]
        for ecosystem, display in _DISPLAY_NAMES.items():
            if display.lower() == name.lower():
                return ecosystem
        raise ValueError(f"Unsupported ecosystem: {name}")


_DISPLAY_NAMES = {
    Ecosystem.NPM: 'npm',
    Ecosystem.GO: 'Go',
    Ecosystem.PYPI: 'PyPI',
    Ecosystem.MAVEN: 'Maven',
    Ecosystem.CRATES: 'crates',
}

ECOSYSTEMS = {
    'EcosystemNpm': Ecosystem.NPM,
    'EcosystemGo': Ecosystem.GO,
    'EcosystemPypi': Ecosystem.PYPI,
    'EcosystemMaven': Ecosystem.MAVEN,
    'EcosystemCrates': Ecosystem.CRATES,
}


def ecosystem_name(value: int) -> str:
    """Display name for an ecosystem code, or '' for codes Trusty does not know."""
    try:
        return Ecosystem(value).as_string()
    except ValueError:
        return ''
