from __future__ import annotations

import dataclasses
from datetime import datetime
from datetime import timezone
from enum import Enum

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


class EntryKind(Enum):
    """What a directory entry was when it was listed."""

    FILE = "file"
    DIRECTORY = "directory"
    OTHER = "other"


@dataclasses.dataclass(frozen=True)
class Entry:
    """A path observed during a walk, tagged with its kind."""

    path: str
    kind: EntryKind

    @property
    def is_file(self) -> bool:
        return self.kind is EntryKind.FILE

    @property
    def is_directory(self) -> bool:
        return self.kind is EntryKind.DIRECTORY


@dataclasses.dataclass(frozen=True)
class AccessRecord:
    """A file and its last access time in epoch seconds."""

    path: str
    accessed: int

    @property
    def accessed_at(self) -> datetime:
        """Return the access time as an aware UTC datetime."""
        return datetime.fromtimestamp(self.accessed, tz=timezone.utc)

    def __str__(self) -> str:
        """Return the report line for this record."""
        return f"{self.path} - {self.accessed_at.strftime(TIMESTAMP_FORMAT)}"
