from __future__ import annotations

import logging
import os

from .auditerrors import EntryTypeError
from .auditmodel import Entry
from .auditmodel import EntryKind


class DirectoryWalker:
    """List the files under a directory, optionally descending into subdirectories."""

    logger = logging.getLogger(__name__)

    def __init__(self, root: str, *, recursive: bool = False) -> None:
        """
        Initialize a new DirectoryWalker.

        Args:
            root: The directory to list. Must exist and be readable.

        Keyword Args:
            recursive: Descend into subdirectories. Defaults to False.
        """
        self._root = root
        self._recursive = recursive

    @property
    def root(self) -> str:
        return self._root

    @property
    def recursive(self) -> bool:
        return self._recursive

    def list_files(self) -> list[str]:
        """
        Return the paths of all regular files found under the root.

        Directories are never included, whether or not they were descended into.

        Raises:
            OSError: The root or any visited directory could not be listed, or
                the type of an entry could not be determined.
        """
        return [entry.path for entry in self.walk() if entry.is_file]

    def walk(self) -> list[Entry]:
        """
        Return every entry observed under the root, tagged with its kind.

        Directories are walked depth-first from an explicit stack of pending
        directories. Symlinks to directories are reported but not descended into.
        Nothing is returned if any directory fails to list.

        Raises:
            OSError: The root or any visited directory could not be listed, or
                the type of an entry could not be determined.
        """
        entries: list[Entry] = []
        pending = [self._root]

        while pending:
            directory = pending.pop()
            subdirectories: list[str] = []

            for entry in self._scan_directory(directory):
                entries.append(entry)

                if entry.is_directory and self._recursive:
                    subdirectories.append(entry.path)

            # Reversed so the first listed subdirectory is walked first
            pending.extend(reversed(subdirectories))

        self.logger.debug("Found %s entries under %s", len(entries), self._root)

        return entries

    def _scan_directory(self, directory: str) -> list[Entry]:
        """
        List and tag the immediate entries of a single directory.

        The directory handle is closed before this returns.

        Raises:
            OSError
        """
        self.logger.debug("Listing directory: %s", directory)
        entries: list[Entry] = []

        with os.scandir(directory) as listing:
            for direntry in listing:
                entries.append(Entry(direntry.path, self._entry_kind(direntry)))

        return entries

    @staticmethod
    def _entry_kind(direntry: os.DirEntry[str]) -> EntryKind:
        """
        Classify a directory entry as file, directory or other.

        Raises:
            EntryTypeError: The entry type could not be queried.
        """
        try:
            if direntry.is_dir(follow_symlinks=False):
                return EntryKind.DIRECTORY

            if direntry.is_file():
                return EntryKind.FILE

        except OSError as error:
            raise EntryTypeError(
                error.errno,
                f"Could not determine type of entry ({error.strerror})",
                direntry.path,
            ) from error

        return EntryKind.OTHER


def list_files(root: str, recursive: bool = False) -> list[str]:
    """Return the paths of all regular files under root."""
    return DirectoryWalker(root, recursive=recursive).list_files()
