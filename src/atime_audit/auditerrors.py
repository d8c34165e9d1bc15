from __future__ import annotations


class AuditError(Exception):
    """Base class for errors raised while auditing access times."""


class EntryTypeError(AuditError, OSError):
    """The type (file or directory) of a directory entry could not be determined."""


class AccessTimeUnsupportedError(AuditError):
    """The platform or filesystem does not expose access times."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Could not get access time for file: {path}")
        self.path = path


class InvalidTimestampError(AuditError, ValueError):
    """An access time cannot be expressed as non-negative epoch seconds."""

    def __init__(self, path: str, atime_ns: int) -> None:
        super().__init__(f"Invalid access time {atime_ns}ns for file: {path}")
        self.path = path
        self.atime_ns = atime_ns
