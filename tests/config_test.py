from trustytypes.core import config as config_module
from trustytypes.core.config import get_config
from trustytypes.core.config import TrustyConfig


def test_default_web_url(monkeypatch):
    monkeypatch.delenv('TRUSTY_WEB_URL', raising=False)
    assert TrustyConfig().web_base_url == 'https://www.trustypkg.dev'


def test_env_override(monkeypatch):
    monkeypatch.setenv('TRUSTY_WEB_URL', 'http://localhost:3000')
    assert TrustyConfig.load().web_base_url == 'http://localhost:3000'


def test_get_package_url():
    config = TrustyConfig(web_base_url='https://trusty.example.test/')
    assert config.get_package_url('PyPI', 'requests') == 'https://trusty.example.test/pypi/requests'
    assert config.get_package_url('npm', '@types/node') == 'https://trusty.example.test/npm/@types/node'


def test_get_config_is_cached(monkeypatch):
    monkeypatch.setattr(config_module, '_config', None)
    assert get_config() is get_config()
