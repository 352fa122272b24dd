"""
Shared fixtures for the unit tests.

Provides an in-memory filesystem so listings can be tested with a fixed
enumeration order and with simulated stat failures.
"""

import errno
import os
import stat
from typing import Dict, Iterator, Optional

import pytest

from dirlist.tools.fs_lister import FileSystem


def make_stat(is_dir: bool = False, size: int = 0, mtime: float = 1700000000) -> os.stat_result:
    """Build a stat result for a file or directory."""
    mode = (stat.S_IFDIR | 0o755) if is_dir else (stat.S_IFREG | 0o644)
    return os.stat_result((mode, 0, 0, 1, 0, 0, size, mtime, mtime, mtime))


class FakeFileSystem(FileSystem):
    """
    Single directory held in memory.

    Children are listed in insertion order. A child mapped to None cannot be
    stat'ed. With fail_after set, reading the directory fails with EIO after
    that many children.
    """

    def __init__(
        self,
        root: str,
        children: Dict[str, Optional[os.stat_result]],
        fail_after: Optional[int] = None
    ):
        self.root = root
        self.children = children
        self.fail_after = fail_after
        self.stat_calls = []

    def list_children(self, path: str) -> Iterator[str]:
        if "\x00" in path:
            raise ValueError("scandir: embedded null character in path")
        if path != self.root:
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), path)
        return self._iter_children()

    def _iter_children(self) -> Iterator[str]:
        for index, name in enumerate(self.children):
            if index == self.fail_after:
                raise OSError(errno.EIO, os.strerror(errno.EIO), self.root)
            yield os.path.join(self.root, name)

    def stat(self, path: str) -> os.stat_result:
        self.stat_calls.append(path)
        result = self.children.get(os.path.basename(path))
        if result is None:
            raise PermissionError(errno.EACCES, os.strerror(errno.EACCES), path)
        return result


@pytest.fixture
def fake_fs():
    """Factory for in-memory filesystems rooted at /virtual."""
    def _make(
        children: Dict[str, Optional[os.stat_result]],
        root: str = "/virtual",
        fail_after: Optional[int] = None
    ) -> FakeFileSystem:
        return FakeFileSystem(root, children, fail_after)
    return _make


@pytest.fixture
def stat_factory():
    """Factory for stat results."""
    return make_stat
