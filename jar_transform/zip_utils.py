from __future__ import annotations

import zipfile
from pathlib import Path

from jar_tools.errors import ArchiveNotFoundError, CorruptArchiveError

JAR_SUFFIX = ".jar"
PROPERTIES_SUFFIX = ".properties"


def derive_output_name(name: str) -> str:
    """``library-1.0.jar`` -> ``library-1.0.properties``.

    Only the first occurrence of the jar suffix is replaced.
    """
    return name.replace(JAR_SUFFIX, PROPERTIES_SUFFIX, 1)


def is_jar_candidate(p: Path) -> bool:
    if p.name.startswith("."):
        return False
    return p.is_file() and p.name.endswith(JAR_SUFFIX)


def normalize_member_name(name: str) -> str:
    # jars built on Windows sometimes use backslash separators
    return name.replace("\\", "/").lstrip("/")


def should_skip_member(member_name: str) -> bool:
    parts = [p for p in normalize_member_name(member_name).split("/") if p]
    if not parts:
        return True
    if parts[0] in {"__MACOSX", "META-INF"}:
        return True
    if parts[-1] == ".DS_Store":
        return True
    return False


def open_jar(jar_path: Path) -> zipfile.ZipFile:
    """Open a jar for reading; missing or unreadable archives raise OSError subclasses."""
    jp = jar_path.resolve()
    if not jp.exists():
        raise ArchiveNotFoundError(f"jar does not exist: {jp}")
    if not jp.is_file():
        raise CorruptArchiveError(f"not a regular file: {jp}")
    try:
        return zipfile.ZipFile(jp, "r")
    except zipfile.BadZipFile as e:
        raise CorruptArchiveError(f"not a valid jar/zip archive: {jp} ({e})") from e
