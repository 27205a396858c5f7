"""Test configuration and fixtures for dir2clip."""

import errno
from pathlib import Path, PurePosixPath
from typing import Dict, Iterable, List, Optional

import pytest

from dir2clip.file_system_tree.file_system import BaseFileSystem, DirectoryEntry
from dir2clip.types import EntryKind


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


class MemoryFileSystem(BaseFileSystem):
    """In-memory filesystem rooted at /mem.

    Keys of `files` are paths relative to the root; a key ending in "/" creates an
    empty directory. Listings come back in reverse insertion order so that tests can
    tell sorted output from listing order.
    """

    root = Path("/mem")

    def __init__(
        self,
        files: Dict[str, bytes],
        unreadable: Iterable[str] = (),
        unlistable: Iterable[str] = (),
    ) -> None:
        base = PurePosixPath(self.root)
        self.files: Dict[PurePosixPath, bytes] = {}
        self.directories: List[PurePosixPath] = [base]
        for name, data in files.items():
            relative = PurePosixPath(name.rstrip("/"))
            current = base
            for part in relative.parts[:-1]:
                current = current / part
                if current not in self.directories:
                    self.directories.append(current)
            path = base / relative
            if name.endswith("/"):
                if path not in self.directories:
                    self.directories.append(path)
            else:
                self.files[path] = data
        self.unreadable = {PurePosixPath(self.root) / name for name in unreadable}
        self.unlistable = {PurePosixPath(self.root) / name.rstrip("/") for name in unlistable}
        self.reads: List[PurePosixPath] = []
        self.listings: List[PurePosixPath] = []

    def list_dir(self, path: Path) -> List[DirectoryEntry]:
        key = PurePosixPath(path)
        self.listings.append(key)
        if key in self.unlistable:
            raise PermissionError(errno.EACCES, "Permission denied", str(path))
        if key not in self.directories:
            raise FileNotFoundError(errno.ENOENT, "No such file or directory", str(path))
        entries = [DirectoryEntry(d.name, EntryKind.DIRECTORY) for d in self.directories if d.parent == key and d != key]
        entries += [DirectoryEntry(f.name, EntryKind.FILE) for f in self.files if f.parent == key]
        return list(reversed(entries))

    def stat(self, path: Path) -> EntryKind:
        key = PurePosixPath(path)
        if key in self.directories:
            return EntryKind.DIRECTORY
        if key in self.files:
            return EntryKind.FILE
        raise FileNotFoundError(errno.ENOENT, "No such file or directory", str(path))

    def read_bytes(self, path: Path, limit: Optional[int] = None) -> bytes:
        key = PurePosixPath(path)
        self.reads.append(key)
        if key in self.unreadable:
            raise PermissionError(errno.EACCES, "Permission denied", str(path))
        if key not in self.files:
            raise IsADirectoryError(errno.EISDIR, "Is a directory", str(path))
        data = self.files[key]
        return data if limit is None else data[:limit]


@pytest.fixture
def memory_fs():
    """Factory fixture creating MemoryFileSystem instances."""
    return MemoryFileSystem


@pytest.fixture
def project_dir(tmp_path):
    """Create the proj/ layout used throughout the tests.

    proj/
      a.txt            "hello"
      node_modules/x.js
      src/main.py
      src/utils/helpers.py
      blob.bin         10 bytes with a null at byte 5
    """
    root = tmp_path / "proj"
    root.mkdir()
    (root / "a.txt").write_text("hello")
    (root / "node_modules").mkdir()
    (root / "node_modules" / "x.js").write_text("ignored")
    (root / "src").mkdir()
    (root / "src" / "main.py").write_text("def main():\n    print('Hello')\n")
    (root / "src" / "utils").mkdir()
    (root / "src" / "utils" / "helpers.py").write_text("def helper():\n    pass\n")
    (root / "blob.bin").write_bytes(b"abcd\x00efghi")
    return root
