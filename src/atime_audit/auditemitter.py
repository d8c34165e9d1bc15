from __future__ import annotations

import logging
import os
import sys
from collections import deque
from datetime import datetime

from .auditconfig import AuditConfig
from .auditmodel import AccessRecord


class AuditEmitter:
    """A class to emit access time lines to various targets."""

    logger = logging.getLogger(__name__)

    def __init__(self, config: AuditConfig) -> None:
        """Initialize the emitter."""
        self._config = config
        self._records: deque[AccessRecord] = deque()

    def emit(self, *, batch_size: int = 500) -> None:
        """
        Emit all stored records to the configured targets. Empties the queue.

        Records are emitted in the order they were added.

        Keyword Args:
            batch_size: The number of lines to emit at a time. Defaults to 500.
        """
        count = 0
        while self._records:
            lines = self._get_lines(batch_size)

            self.to_stdout(lines)
            self.to_file(lines)

            count += len(lines)

        self.logger.info("Emitted %d access time lines.", count)

    def add_record(self, record: AccessRecord) -> None:
        """Add a record to the queue of records to emit."""
        self._records.append(record)

    def _get_lines(self, max_lines: int) -> list[str]:
        """Build a list of lines to emit, removing them from the emitter."""
        lines: list[str] = []
        while self._records and len(lines) < max_lines:
            lines.append(str(self._records.popleft()))

        return lines

    def _output_filename(self) -> str:
        """Return the configured output file or <config_name>_<date>_access_times.txt"""
        if self._config.output_file:
            return self._config.output_file

        date = datetime.now().strftime("%Y%m%d")
        return f"{self._config.config_name}_{date}_access_times.txt"

    def to_file(self, lines: list[str]) -> None:
        """
        Append lines to the output file.

        Args:
            lines: A list of lines to emit.
        """
        if not self._config.emit_file or not lines:
            return

        filename = self._output_filename()

        with open(
            filename, "a", encoding="utf-8", errors="surrogateescape"
        ) as file_out:
            file_out.write("\n".join(lines) + "\n")

        self.logger.debug("Emitted %d lines to %s", len(lines), filename)

    def to_stdout(self, lines: list[str]) -> None:
        """
        Print lines to stdout.

        Bytes in file names that are not valid in the filesystem encoding are
        shown as U+FFFD so one bad name does not abort the batch.

        Args:
            lines: A list of lines to emit.
        """
        if not self._config.emit_stdout or not lines:
            return

        print("\n".join(_displayable(line) for line in lines))

        self.logger.debug("Emitted %d lines to stdout", len(lines))


def _displayable(line: str) -> str:
    """Replace surrogate-escaped bytes from os.scandir with U+FFFD."""
    encoding = sys.getfilesystemencoding()
    return os.fsencode(line).decode(encoding, errors="replace")
