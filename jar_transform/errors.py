from __future__ import annotations

from pathlib import Path


class TransformError(RuntimeError):
    """Unrecoverable failure transforming one artifact."""

    def __init__(self, message: str, artifact: Path) -> None:
        super().__init__(message)
        self.artifact = artifact
