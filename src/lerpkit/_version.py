"""Minimal version helper for the lerpkit package."""

from importlib import metadata
from pathlib import Path

PACKAGE_NAME = "lerpkit"
FALLBACK_VERSION = "0.0.0"


def get_project_root() -> Path:
    """Return the source checkout root (the directory holding ``src``)."""

    return Path(__file__).resolve().parents[2]


def get_version() -> str:
    """
    Get version for the package.

    :return: Version number.
    """
    try:  # installed
        version = metadata.version(PACKAGE_NAME)
    except metadata.PackageNotFoundError:  # dev
        import setuptools_scm  # type: ignore[import-untyped]

        version = setuptools_scm.get_version(
            root=str(get_project_root()), fallback_version=FALLBACK_VERSION
        )
    return version


__all__ = ["get_version", "get_project_root"]
