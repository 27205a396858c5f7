"""Snapshot construction for files and directories.

A snapshot is the text placed on the clipboard. For a directory it is the tree
listing followed by the file blocks of every text file beneath it; for a single file
it is just that file's block.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from dir2clip.exceptions import NotReadableError, StatFailureError
from dir2clip.exclusion_rules.base_rules import BaseExclusionRules
from dir2clip.exclusion_rules.segment_rules import SegmentExclusionRules
from dir2clip.file_content_printer import FileContentPrinter, format_file_block, read_text_file
from dir2clip.file_system_tree.file_system import BaseFileSystem, LocalFileSystem
from dir2clip.file_system_tree.file_system_tree import FileSystemTree
from dir2clip.types import EntryKind, PathType

TREE_HEADER = "Directory Tree:\n"
CONTENTS_HEADER = "\n\nFile Contents:\n"


@dataclass(frozen=True)
class Snapshot:
    """A finished snapshot together with what it was taken of.

    Attributes:
        text: The snapshot text.
        kind: Whether the target was a file or a directory.
        name: Display name of the target.
    """

    text: str
    kind: EntryKind
    name: str


class DirectorySnapshot:
    """Snapshot of a directory: tree listing plus concatenated file blocks.

    Everything is computed during initialization, so the object holds the complete
    output in memory. Without exclusion_rules the built-in default exclusions apply;
    SegmentExclusionRules(include_defaults=False) turns them off.

    Example:
        >>> import tempfile
        >>> from pathlib import Path
        >>> with tempfile.TemporaryDirectory() as tmpdir:
        ...     root = Path(tmpdir)
        ...     _ = (root / "a.txt").write_text("hello")
        ...     print(DirectorySnapshot(root).text, end="")
        Directory Tree:
        📄 a.txt
        <BLANKLINE>
        <BLANKLINE>
        File Contents:
        a.txt
        ```
        hello
        ```
        <BLANKLINE>
    """

    def __init__(
        self,
        directory: PathType,
        *,
        exclusion_rules: Optional[BaseExclusionRules] = None,
        file_system: Optional[BaseFileSystem] = None,
        interrupt_check: Optional[Callable[[], bool]] = None,
    ) -> None:
        """Walk the directory and build the snapshot.

        Args:
            directory: Directory to snapshot.
            exclusion_rules: Rules for excluding files and directories. Defaults to the
                built-in exclusions.
            file_system: Filesystem to read from. Defaults to the local disk.
            interrupt_check: Returns True once the walk should stop. Defaults to None.

        Raises:
            StatFailureError: If the directory cannot be inspected or listed.
            NotADirectoryError: If the path is not a directory.
            WalkInterruptedError: If interrupt_check fired during the walk.
        """
        self.directory = Path(directory)
        rules = exclusion_rules if exclusion_rules is not None else SegmentExclusionRules()
        self._fs_tree = FileSystemTree(self.directory, rules, file_system, interrupt_check)
        self._content_printer = FileContentPrinter(self._fs_tree)

        self._tree_string = self._fs_tree.get_tree_representation()
        self._content_string = self._content_printer.get_contents()

    @property
    def tree_string(self) -> str:
        """The tree listing, one newline-terminated line per entry."""
        return self._tree_string

    @property
    def content_string(self) -> str:
        """The concatenated file blocks."""
        return self._content_string

    @property
    def text(self) -> str:
        """The complete snapshot text."""
        return TREE_HEADER + self._tree_string + CONTENTS_HEADER + self._content_string

    @property
    def file_count(self) -> int:
        """Number of files listed in the tree."""
        return self._fs_tree.get_file_count()

    @property
    def directory_count(self) -> int:
        """Number of directories listed in the tree, excluding the root."""
        return self._fs_tree.get_directory_count()

    @property
    def skipped_file_count(self) -> int:
        """Number of listed files left out of the contents as binary or unreadable."""
        return self._content_printer.skipped_files


def resolve_target(target: PathType, file_system: Optional[BaseFileSystem] = None) -> EntryKind:
    """Determine whether the target is a file or a directory.

    Raises:
        StatFailureError: If the target cannot be inspected.
    """
    fs = file_system if file_system is not None else LocalFileSystem()
    try:
        return fs.stat(Path(target))
    except OSError as e:
        raise StatFailureError(str(target), e.strerror or str(e)) from e


def build_file_snapshot(file_path: PathType, file_system: Optional[BaseFileSystem] = None) -> str:
    """Build the snapshot of a single file.

    Raises:
        NotReadableError: If the file looks binary or cannot be read.
    """
    path = Path(file_path)
    return format_file_block(path.name, read_text_file(path, file_system))


def target_name(target: PathType) -> str:
    """Display name for a target; "." and similar resolve to the real directory name."""
    path = Path(target)
    return path.name or path.resolve().name or str(path)


def create_snapshot(
    target: PathType,
    exclusion_rules: Optional[BaseExclusionRules] = None,
    file_system: Optional[BaseFileSystem] = None,
    interrupt_check: Optional[Callable[[], bool]] = None,
) -> Snapshot:
    """Build the snapshot of a file or directory.

    Args:
        target: File or directory to snapshot.
        exclusion_rules: Rules applied while walking a directory. Not used for files.
            Defaults to the built-in exclusions.
        file_system: Filesystem to read from. Defaults to the local disk.
        interrupt_check: Polled during a directory walk; returning True cancels it.

    Returns:
        The Snapshot.

    Raises:
        StatFailureError: If the target cannot be inspected, or a directory target
            cannot be listed.
        NotReadableError: If a file target looks binary or cannot be read.
        WalkInterruptedError: If interrupt_check fired during a directory walk.
    """
    kind = resolve_target(target, file_system)
    if kind is EntryKind.DIRECTORY:
        text = DirectorySnapshot(
            target, exclusion_rules=exclusion_rules, file_system=file_system, interrupt_check=interrupt_check
        ).text
    else:
        text = build_file_snapshot(target, file_system)
    return Snapshot(text=text, kind=kind, name=target_name(target))


def build_snapshot(
    target: PathType,
    exclusion_rules: Optional[BaseExclusionRules] = None,
    file_system: Optional[BaseFileSystem] = None,
) -> str:
    """Build the snapshot text of a file or directory.

    See create_snapshot() for arguments and errors.
    """
    return create_snapshot(target, exclusion_rules, file_system).text
