"""Filesystem access used by the tree builder and content collection.

The tree and the content printer only need three operations: listing a directory,
classifying a path, and reading bytes from a file. Keeping them behind a small
interface lets the traversal run against something other than the local disk, such
as an in-memory tree in tests or an editor's virtual filesystem.
"""

import os
import stat
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, NamedTuple, Optional

from dir2clip.types import EntryKind


class DirectoryEntry(NamedTuple):
    """One child of a listed directory."""

    name: str
    kind: EntryKind


class BaseFileSystem(ABC):
    """Abstract filesystem interface.

    All methods raise OSError (or a subclass) when the underlying operation fails.
    """

    @abstractmethod
    def list_dir(self, path: Path) -> List[DirectoryEntry]:
        """List the immediate children of a directory.

        Entries are classified without following symbolic links. Order is whatever the
        underlying listing returns; callers sort as needed.
        """
        pass

    @abstractmethod
    def stat(self, path: Path) -> EntryKind:
        """Classify a path, following symbolic links."""
        pass

    @abstractmethod
    def read_bytes(self, path: Path, limit: Optional[int] = None) -> bytes:
        """Read a file's bytes, or at most `limit` bytes from its start."""
        pass


class LocalFileSystem(BaseFileSystem):
    """BaseFileSystem backed by the local disk.

    Example:
        >>> import tempfile
        >>> from pathlib import Path
        >>> with tempfile.TemporaryDirectory() as tmpdir:
        ...     root = Path(tmpdir)
        ...     _ = (root / "a.txt").write_text("hello")
        ...     (root / "src").mkdir()
        ...     fs = LocalFileSystem()
        ...     [(entry.name, entry.kind.value) for entry in sorted(fs.list_dir(root))]
        ...     fs.read_bytes(root / "a.txt", 2)
        [('a.txt', 'file'), ('src', 'directory')]
        b'he'
    """

    def list_dir(self, path: Path) -> List[DirectoryEntry]:
        entries = []
        with os.scandir(path) as it:
            for entry in it:
                try:
                    is_dir = entry.is_dir(follow_symlinks=False)
                except OSError:
                    is_dir = False
                entries.append(DirectoryEntry(entry.name, EntryKind.DIRECTORY if is_dir else EntryKind.FILE))
        return entries

    def stat(self, path: Path) -> EntryKind:
        mode = os.stat(path).st_mode
        return EntryKind.DIRECTORY if stat.S_ISDIR(mode) else EntryKind.FILE

    def read_bytes(self, path: Path, limit: Optional[int] = None) -> bytes:
        with open(path, "rb") as file:
            if limit is None:
                return file.read()
            return file.read(limit)
