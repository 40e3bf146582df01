from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol


@dataclass(frozen=True)
class JarScanResult:
    input_path: Path
    output_path: Path
    packages: tuple[str, ...]


class Scanner(Protocol):
    """Contract between the transform adapter and a jar scanner.

    Implementations read ``input_path`` and write exactly one file at
    ``output_path``. Failures are raised as ``OSError``.
    """

    key: str  # e.g. "packages"

    def scan(self, *, input_path: Path, output_path: Path) -> JarScanResult: ...
