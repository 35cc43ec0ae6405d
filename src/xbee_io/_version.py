"""Version of the installed xbee-io distribution."""

from importlib.metadata import PackageNotFoundError, version

DISTRIBUTION_NAME = "xbee-io"
DEV_VERSION = "0.0.0-dev"


def get_version(distribution: str = DISTRIBUTION_NAME) -> str:
    """Return the installed version, or DEV_VERSION when running from a plain checkout."""
    try:
        return version(distribution)
    except PackageNotFoundError:
        return DEV_VERSION


VERSION = get_version()
