"""Console file manager package.

Exposes the installed version as `__version__`; falls back to 0.0.0 when run
from a source checkout.
"""
from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("console-file-manager")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"
