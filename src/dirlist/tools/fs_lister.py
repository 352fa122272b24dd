"""
Single-level directory enumeration for dirlist.

This module lists the immediate children of a directory, classifies each child
as a file or folder and attaches filesystem metadata. Listing is best-effort:
a child that cannot be described is dropped or degraded, and only a directory
that cannot be listed at all is reported as an error.
"""

import os
import stat
from typing import Dict, List, Optional, Iterator
import logging

from ..models.entry import Entry, FileEntry, FolderEntry


logger = logging.getLogger(__name__)


class ListingError(Exception):
    """Base class for errors raised by directory listings."""
    pass


class RootUnavailableError(ListingError):
    """Raised when the requested directory cannot be listed at all."""

    def __init__(self, path: str, message: str):
        super().__init__(message)
        self.path = path


class FileSystem:
    """
    Filesystem operations needed to list a directory.

    Subclass this to list something other than the local disk, or to simulate
    failures in tests.
    """

    def list_children(self, path: str) -> Iterator[str]:
        """
        Open a directory and iterate over the paths of its immediate children.

        The directory is opened before this returns. Errors reading it after
        that surface from the iterator.

        Raises:
            OSError: If the directory cannot be opened
            ValueError: If the path cannot be passed to the OS at all
        """
        raise NotImplementedError

    def stat(self, path: str) -> os.stat_result:
        """
        Get metadata for a path, following symlinks.

        Raises:
            OSError: If the path cannot be stat'ed
        """
        raise NotImplementedError


class LocalFileSystem(FileSystem):
    """The local filesystem, via ``os.scandir`` and ``os.stat``."""

    def list_children(self, path: str) -> Iterator[str]:
        return self._iter_paths(os.scandir(path))

    @staticmethod
    def _iter_paths(entries) -> Iterator[str]:
        with entries:
            for entry in entries:
                yield entry.path

    def stat(self, path: str) -> os.stat_result:
        return os.stat(path)


def decode_name(child_path: str) -> str:
    """
    Get the display name of a child path.

    Names holding bytes that are not valid UTF-8 (surrogate-escaped by the os
    module) degrade to an empty string.
    """
    name = os.path.basename(child_path)
    try:
        name.encode('utf-8')
    except UnicodeEncodeError:
        return ""
    return name


def display_path(child_path: str) -> str:
    """Render a path as text, replacing undecodable bytes with U+FFFD."""
    return os.fsencode(child_path).decode('utf-8', errors='replace')


def format_modified(stat_result: os.stat_result) -> Optional[str]:
    """
    Format a modification time as whole seconds since the epoch.

    Returns:
        Timestamp text, or None when the time is before the epoch or unusable
    """
    try:
        seconds = int(stat_result.st_mtime)
    except (ValueError, OverflowError):
        return None
    if seconds < 0:
        return None
    return str(seconds)


class DirectoryEnumerator:
    """
    Lists the immediate children of a directory as entries.

    Every entry is built with a relevance of 0; ranking happens later. The
    enumerator never descends below the first level.
    """

    def __init__(self, filesystem: Optional[FileSystem] = None):
        """
        Initialize the enumerator.

        Args:
            filesystem: Filesystem to list (defaults to the local disk)
        """
        self.filesystem = filesystem or LocalFileSystem()
        self._stats = self._empty_stats()

    @staticmethod
    def _empty_stats() -> Dict[str, int]:
        return {
            'children_seen': 0,
            'children_skipped': 0,
            'files_excluded': 0,
            'read_errors': 0,
            'entries_returned': 0
        }

    def enumerate(self, path: str, include_files: bool = True) -> List[Entry]:
        """
        List the immediate children of a directory.

        Args:
            path: Directory to list
            include_files: When False, files are still stat'ed but left out

        Returns:
            Entries in the order the filesystem reported them. If reading
            fails partway through, the entries read so far.

        Raises:
            RootUnavailableError: If the directory is missing, is not a
                directory, or cannot be opened
        """
        try:
            children = iter(self.filesystem.list_children(path))
        except (OSError, ValueError) as e:
            logger.warning(f"Cannot list directory {path}: {e}")
            raise RootUnavailableError(path, str(e)) from e

        entries: List[Entry] = []

        while True:
            try:
                child_path = next(children)
            except StopIteration:
                break
            except OSError as e:
                # Keep what was read before the directory became unreadable
                logger.warning(f"Stopped reading {path} after {len(entries)} entries: {e}")
                self._stats['read_errors'] += 1
                break

            self._stats['children_seen'] += 1

            entry = self._create_entry(child_path)
            if entry is None:
                self._stats['children_skipped'] += 1
                continue

            if not include_files and not entry.is_folder():
                self._stats['files_excluded'] += 1
                continue

            entries.append(entry)

        self._stats['entries_returned'] += len(entries)
        logger.debug(f"Listed {len(entries)} entries in {path}")
        return entries

    def _create_entry(self, child_path: str) -> Optional[Entry]:
        """
        Build an entry for one child.

        Args:
            child_path: Path of the child as reported by the filesystem

        Returns:
            The entry, or None if the child cannot be stat'ed
        """
        try:
            stat_result = self.filesystem.stat(child_path)
        except OSError as e:
            logger.debug(f"Skipping unreadable entry {child_path}: {e}")
            return None

        name = decode_name(child_path)
        entry_path = display_path(child_path)
        modified = format_modified(stat_result)

        if stat.S_ISDIR(stat_result.st_mode):
            return FolderEntry(path=entry_path, name=name, modified=modified)

        return FileEntry(
            path=entry_path,
            name=name,
            size=stat_result.st_size,
            modified=modified
        )

    def get_stats(self) -> Dict[str, int]:
        """
        Get statistics about the enumerations run so far.

        Returns:
            Dictionary containing enumeration counters
        """
        return self._stats.copy()

    def reset_stats(self) -> None:
        """Reset the statistics counters."""
        self._stats = self._empty_stats()
