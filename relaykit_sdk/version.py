"""
Version information for the RelayKit SDK.

Installed distribution metadata wins. A source checkout without metadata
reads ``[project].version`` from pyproject.toml.
"""
import importlib.metadata
import pathlib
from typing import Optional

import tomli

DISTRIBUTION_NAME = "relaykit-sdk"
DEFAULT_VERSION = "0.1.0"
PYPROJECT_PATH = pathlib.Path(__file__).resolve().parent.parent / "pyproject.toml"


def installed_version() -> Optional[str]:
    try:
        return importlib.metadata.version(DISTRIBUTION_NAME)
    except importlib.metadata.PackageNotFoundError:
        return None


def source_tree_version(path: pathlib.Path = PYPROJECT_PATH) -> Optional[str]:
    """Return ``[project].version`` from a pyproject.toml, or None if unreadable"""
    try:
        data = tomli.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, tomli.TOMLDecodeError):
        return None

    project = data.get("project")
    version = project.get("version") if isinstance(project, dict) else None
    return version if isinstance(version, str) else None


def get_version() -> str:
    return installed_version() or source_tree_version(PYPROJECT_PATH) or DEFAULT_VERSION


__version__ = get_version()
