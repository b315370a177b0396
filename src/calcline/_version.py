"""Single source of truth for the calcline version."""

from importlib.metadata import PackageNotFoundError, version

# Fallback when running from a source tree that is not installed
__version__ = "0.1.0"


def get_version() -> str:
    """Get calcline version from package metadata."""
    try:
        return version("calcline")
    except PackageNotFoundError:
        return __version__
