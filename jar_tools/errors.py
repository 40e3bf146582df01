from __future__ import annotations


class JarScanError(OSError):
    """Scanner failure. Subclasses OSError so callers handle it as an I/O error."""

    def __init__(self, message: str, code: str) -> None:
        super().__init__(message)
        self.code = code


class ArchiveNotFoundError(JarScanError):
    def __init__(self, message: str) -> None:
        super().__init__(message, "archive_not_found")


class CorruptArchiveError(JarScanError):
    def __init__(self, message: str) -> None:
        super().__init__(message, "corrupt_archive")
