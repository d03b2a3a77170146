"""Version of the installed trustytypes distribution."""
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version

try:
    __version__ = version('trustytypes')
except PackageNotFoundError:
    # Running from a source checkout
    __version__ = '0.0.0-dev'
