"""Locate the nearest project root for a file, per ecosystem."""

from enum import Enum
import os.path
from pathlib import Path

from .common import ImmutableDict


class Ecosystem(Enum):
    """Toolchain families that have their own project markers."""

    RUST = "rust"
    NODE = "node"
    PYTHON = "python"
    JAVA = "java"
    GO = "go"
    GENERIC = "generic"


CARGO_TOML = "Cargo.toml"
PACKAGE_JSON = "package.json"
PYPROJECT_TOML = "pyproject.toml"
SETUP_PY = "setup.py"
POM_XML = "pom.xml"
BUILD_GRADLE = "build.gradle"
BUILD_GRADLE_KTS = "build.gradle.kts"
GO_MOD = "go.mod"
GIT_DIR = ".git"

GRADLE_MARKERS = (BUILD_GRADLE, BUILD_GRADLE_KTS)

PROJECT_MARKERS: ImmutableDict[Ecosystem, tuple[str, ...]] = ImmutableDict(
    {
        Ecosystem.RUST: (CARGO_TOML,),
        Ecosystem.NODE: (PACKAGE_JSON,),
        Ecosystem.PYTHON: (PYPROJECT_TOML, SETUP_PY),
        Ecosystem.JAVA: (POM_XML, *GRADLE_MARKERS),
        Ecosystem.GO: (GO_MOD,),
        Ecosystem.GENERIC: (
            CARGO_TOML,
            PACKAGE_JSON,
            PYPROJECT_TOML,
            SETUP_PY,
            POM_XML,
            *GRADLE_MARKERS,
            GO_MOD,
            GIT_DIR,
        ),
    }
)


def find_root(
    file_path: str | os.PathLike[str],
    ecosystem: Ecosystem,
    markers: ImmutableDict[Ecosystem, tuple[str, ...]] = PROJECT_MARKERS,
) -> Path | None:
    """Find the nearest ancestor directory that holds a marker for ``ecosystem``.

    The search starts at the directory containing ``file_path`` and only walks
    upwards. Relative paths are made absolute against the current working
    directory; symlinks are not resolved.

    :param file_path: The file whose project is wanted. It does not need to exist.
    :type file_path: str | os.PathLike[str]
    :param Ecosystem ecosystem: Which marker set to look for.
    :param markers: Marker table to use, keyed by ecosystem.
    :type markers: ImmutableDict[Ecosystem, tuple[str, ...]]
    :return: The project root, or ``None`` if the filesystem root was reached
        without finding a marker.
    :rtype: Path | None
    """
    names = markers[ecosystem]
    cur = os.path.dirname(os.path.abspath(file_path))
    while True:
        if any(os.path.exists(os.path.join(cur, name)) for name in names):
            return Path(cur)
        parent = os.path.dirname(cur)
        if parent == cur:
            return None
        cur = parent


def has_marker(directory: Path, *names: str) -> bool:
    """Return whether ``directory`` directly contains any of ``names``."""
    return any((directory / name).exists() for name in names)
