"""
Pytest fixtures: small jars built on the fly with zipfile.
"""
from __future__ import annotations

import zipfile
from pathlib import Path
from typing import Callable, Iterable

import pytest


def _write_jar(path: Path, entries: Iterable[str]) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    with zipfile.ZipFile(path, "w") as zf:
        for name in entries:
            if name.endswith("/"):
                zf.writestr(name, b"")
            else:
                zf.writestr(name, b"\xca\xfe\xba\xbe")
    return path


@pytest.fixture
def make_jar(tmp_path: Path) -> Callable[..., Path]:
    def _make(name: str, entries: Iterable[str], directory: Path | None = None) -> Path:
        return _write_jar((directory or tmp_path / "jars") / name, entries)

    return _make


@pytest.fixture
def library_jar(make_jar) -> Path:
    return make_jar(
        "library-1.0.jar",
        [
            "META-INF/MANIFEST.MF",
            "META-INF/versions/11/com/example/util/Strings.class",
            "com/",
            "com/example/",
            "com/example/Main.class",
            "com/example/Main$Inner.class",
            "com/example/util/Strings.class",
            "org/acme/io/Reader.class",
            "org/acme/io/resources.txt",
            "Root.class",
        ],
    )
