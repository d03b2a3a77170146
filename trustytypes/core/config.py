"""Configuration management for trustytypes."""
import os
from dataclasses import dataclass
from dataclasses import field


@dataclass
class TrustyConfig:
    web_base_url: str = field(
        default_factory=lambda: os.getenv(
            'TRUSTY_WEB_URL', 'https://www.trustypkg.dev',
        ),
    )

    def get_package_url(self, package_type: str, package_name: str) -> str:
        """Frontend page of a package, e.g. https://www.trustypkg.dev/pypi/requests"""
        return f"{self.web_base_url.rstrip('/')}/{package_type.lower()}/{package_name}"

    @classmethod
    def load(cls) -> 'TrustyConfig':
        return cls()


_config: TrustyConfig | None = None


def get_config() -> TrustyConfig:
    global _config
    if _config is None:
        _config = TrustyConfig.load()
    return _config
