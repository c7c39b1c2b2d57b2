"""
Library metadata attached to responses when version reporting is enabled.
"""

from importlib.metadata import PackageNotFoundError, version

from actions_core import __version__


LIBRARY_NAME = "actions"
DISTRIBUTION_NAME = "actions-core"


def library_version() -> str:
    """Installed distribution version, or the package version from source."""
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        return __version__


def library_metadata(language: str = "python") -> dict[str, str]:
    """Build the name/language/version triple reported to the platform."""
    return {
        "name": LIBRARY_NAME,
        "language": language,
        "version": library_version(),
    }
