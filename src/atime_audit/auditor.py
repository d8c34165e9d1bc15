from __future__ import annotations

import logging
import os
import time

from .auditconfig import AuditConfig
from .auditemitter import AuditEmitter
from .auditmodel import AccessRecord
from .auditresolver import AccessTimeResolver
from .auditwalker import DirectoryWalker


class Auditor:
    """Report the last access time of every file under a directory."""

    logger = logging.getLogger(__name__)

    def __init__(self, config: AuditConfig) -> None:
        """
        Initialize a new Auditor.

        Args:
            config: The configuration to use for this auditor.
        """
        self._config = config
        self._resolver = AccessTimeResolver()
        self._emitter = AuditEmitter(config)

    def run_once(self) -> None:
        """
        Audit the configured directory and emit the results.

        Records resolved before a failure are still emitted, then the error is raised.
        """
        try:
            self.audit()

        except Exception:
            try:
                self.emit()
            except Exception:
                self.logger.exception("Emitting partial results failed")
            raise

        self.emit()

    def audit(self) -> list[AccessRecord]:
        """
        Walk the configured directory and resolve the access time of each file.

        Records are queued on the emitter in traversal order.

        Raises:
            OSError: Walking the directory or reading a file's metadata failed.
            AuditError: An access time was unavailable or invalid.
        """
        root = self._config.root_directory
        recursive = self._config.recursive

        self.logger.info("Auditing %s (recursive=%s)...", root, recursive)
        tic = time.perf_counter()

        walker = DirectoryWalker(root, recursive=recursive)
        records: list[AccessRecord] = []

        for path in walker.list_files():
            # The tree may have changed since it was listed
            if not os.path.isfile(path):
                self.logger.debug("'%s' is no longer a file, skipping.", path)
                continue

            record = AccessRecord(path, self._resolver.resolve(path))
            self._emitter.add_record(record)
            records.append(record)

        toc = time.perf_counter()
        self.logger.info("Audit finished in %s seconds", toc - tic)
        self.logger.info("Detected %s files", len(records))

        return records

    def emit(self) -> None:
        """Emit the queued records to the configured outputs."""
        self.logger.debug("Emitting access times...")
        self._emitter.emit()
