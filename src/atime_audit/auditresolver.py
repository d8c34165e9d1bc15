from __future__ import annotations

import logging
import os

from .auditerrors import AccessTimeUnsupportedError
from .auditerrors import InvalidTimestampError

NANOSECONDS_PER_SECOND = 1_000_000_000


class AccessTimeResolver:
    """Look up the last access time of files."""

    logger = logging.getLogger(__name__)

    def resolve(self, path: str) -> int:
        """
        Return the last access time of path in whole seconds since the epoch.

        Sub-second precision is discarded. Symlinks are followed.

        Args:
            path: The file to look up.

        Raises:
            OSError: The file metadata could not be read (e.g. FileNotFoundError).
            AccessTimeUnsupportedError: The filesystem does not report access times.
            InvalidTimestampError: The access time is before the epoch.
        """
        stat_result = os.stat(path)

        # CPython always sets st_atime_ns, this only maps stat results without it
        atime_ns = getattr(stat_result, "st_atime_ns", None)
        if atime_ns is None:
            raise AccessTimeUnsupportedError(path)

        if atime_ns < 0:
            raise InvalidTimestampError(path, atime_ns)

        accessed = atime_ns // NANOSECONDS_PER_SECOND
        self.logger.debug("'%s' last accessed at %s", path, accessed)

        return accessed


def get_access_time(path: str) -> int:
    """Return the last access time of path in whole epoch seconds."""
    return AccessTimeResolver().resolve(path)
