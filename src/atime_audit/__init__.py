from __future__ import annotations

from .auditconfig import AuditConfig
from .auditerrors import AccessTimeUnsupportedError
from .auditerrors import AuditError
from .auditerrors import EntryTypeError
from .auditerrors import InvalidTimestampError
from .auditor import Auditor
from .auditresolver import AccessTimeResolver
from .auditresolver import get_access_time
from .auditwalker import DirectoryWalker
from .auditwalker import list_files

__all__ = [
    "AccessTimeResolver",
    "AccessTimeUnsupportedError",
    "AuditConfig",
    "AuditError",
    "Auditor",
    "DirectoryWalker",
    "EntryTypeError",
    "InvalidTimestampError",
    "get_access_time",
    "list_files",
]
