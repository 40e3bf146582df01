from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol


class ArtifactProvider(Protocol):
    """Resolves the location of the artifact being transformed."""

    def get(self) -> Path: ...


class TransformOutputs(Protocol):
    """Registers the files a transform produces."""

    def file(self, name: str) -> Path: ...


@dataclass(frozen=True)
class FileArtifact:
    path: Path

    def get(self) -> Path:
        return self.path.resolve()


class DirectoryOutputs:
    """Outputs registered as files directly under ``output_dir``."""

    def __init__(self, output_dir: Path) -> None:
        self.output_dir = output_dir.resolve()
        self._registered: list[Path] = []

    @property
    def registered(self) -> tuple[Path, ...]:
        # a transform that failed leaves nothing behind, so it has no output
        return tuple(p for p in self._registered if p.is_file())

    def file(self, name: str) -> Path:
        if not name or name in {".", ".."} or "/" in name or "\\" in name:
            raise ValueError(f"output name must be a plain file name: {name!r}")
        self.output_dir.mkdir(parents=True, exist_ok=True)
        out = self.output_dir / name
        self._registered.append(out)
        return out
