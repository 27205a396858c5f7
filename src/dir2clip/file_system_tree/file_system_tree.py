"""File system tree representation with configurable exclusion rules.

This module provides the FileSystemTree class, which walks a directory once,
drops excluded entries, and then serves both the indented tree listing and the
ordered sequence of files whose contents go into a snapshot.
"""

from pathlib import Path
from typing import Callable, Iterator, List, Optional, Tuple

from anytree import PreOrderIter

from dir2clip.exceptions import StatFailureError, WalkInterruptedError
from dir2clip.exclusion_rules.base_rules import BaseExclusionRules
from dir2clip.exclusion_rules.segment_rules import SegmentExclusionRules
from dir2clip.file_system_tree.file_system import BaseFileSystem, DirectoryEntry, LocalFileSystem
from dir2clip.file_system_tree.file_system_node import FileSystemNode
from dir2clip.types import EntryKind, PathType

DIRECTORY_MARKER = "📁"
FILE_MARKER = "📄"
INDENT = "  "


def _entry_sort_key(entry: DirectoryEntry) -> Tuple[bool, str, str]:
    # Directories first, then case-insensitive name, exact name as tie-breaker
    return (entry.kind is not EntryKind.DIRECTORY, entry.name.lower(), entry.name)


class FileSystemTree:
    """A tree representation of a directory structure with support for exclusion rules.

    The tree is built lazily on first access. Excluded directories are dropped together
    with everything beneath them, so they show up neither in the tree listing nor in the
    files yielded by iterate_files(). Children are ordered with directories first and
    then by name, which makes the output independent of the order the filesystem lists
    entries in.

    Symbolic links are never followed below the root: a link to a directory is recorded
    as a file node.

    Error Handling:
        Failing to inspect or list the root raises StatFailureError. A subdirectory that
        cannot be listed is kept as an empty directory.

    Cancellation:
        If an interrupt_check callable is given, it is polled before each directory is
        listed (and, through check_interrupted(), before each file is read by a content
        printer). Once it returns True the walk stops with WalkInterruptedError.

    Attributes:
        root_path (Path): The root directory.
        exclusion_rules (Optional[BaseExclusionRules]): Rules for excluding files/directories.
        file_system (BaseFileSystem): Filesystem the tree is read from.
        interrupt_check (Optional[Callable[[], bool]]): Polled to cancel a running walk.

    Example:
        >>> import tempfile
        >>> from pathlib import Path
        >>> from dir2clip.exclusion_rules.segment_rules import SegmentExclusionRules
        >>> with tempfile.TemporaryDirectory() as tmpdir:
        ...     root = Path(tmpdir)
        ...     (root / "src").mkdir()
        ...     (root / "node_modules").mkdir()
        ...     _ = (root / "src" / "main.py").write_text("print('hi')")
        ...     _ = (root / "README.md").write_text("# Demo")
        ...     tree = FileSystemTree(root, SegmentExclusionRules())
        ...     print(tree.get_tree_representation(), end="")
        📁 src/
          📄 main.py
        📄 README.md
    """

    def __init__(
        self,
        root_path: PathType,
        exclusion_rules: Optional[BaseExclusionRules] = None,
        file_system: Optional[BaseFileSystem] = None,
        interrupt_check: Optional[Callable[[], bool]] = None,
    ) -> None:
        """Initialize a FileSystemTree.

        Args:
            root_path: Path to the root directory to represent.
            exclusion_rules: Rules for excluding files and directories. Defaults to None.
            file_system: Filesystem to read from. Defaults to the local disk.
            interrupt_check: Returns True once the walk should stop. Defaults to None.
        """
        self.root_path = Path(root_path)
        self.exclusion_rules = exclusion_rules
        self.file_system = file_system if file_system is not None else LocalFileSystem()
        self.interrupt_check = interrupt_check
        self._tree: Optional[FileSystemNode] = None

    def get_tree(self) -> FileSystemNode:
        """Get the root node of the filesystem tree, building it if necessary.

        Raises:
            StatFailureError: If the root cannot be inspected or listed.
            NotADirectoryError: If the root path isn't a directory.
            WalkInterruptedError: If interrupt_check fired during the walk.
        """
        if self._tree is None:
            self._tree = self._build_tree()
        return self._tree

    def check_interrupted(self, path: PathType) -> None:
        """Raise WalkInterruptedError if the interrupt check has fired."""
        if self.interrupt_check is not None and self.interrupt_check():
            raise WalkInterruptedError(str(path))

    def _build_tree(self) -> FileSystemNode:
        self.check_interrupted(self.root_path)
        try:
            kind = self.file_system.stat(self.root_path)
        except OSError as e:
            raise StatFailureError(str(self.root_path), e.strerror or str(e)) from e
        if kind is not EntryKind.DIRECTORY:
            raise NotADirectoryError(f"Root path is not a directory: {self.root_path}")

        try:
            entries = self.file_system.list_dir(self.root_path)
        except OSError as e:
            raise StatFailureError(str(self.root_path), e.strerror or str(e)) from e

        root = FileSystemNode(self.root_path.name or str(self.root_path), is_dir=True)
        self._add_children(root, self.root_path, "", entries)
        return root

    def _add_children(
        self, node: FileSystemNode, path: Path, relative_path: str, entries: List[DirectoryEntry]
    ) -> None:
        """Recursively attach nodes for the given directory entries."""
        for entry in sorted(entries, key=_entry_sort_key):
            child_relative_path = relative_path + entry.name

            if entry.kind is EntryKind.DIRECTORY:
                if self._is_excluded(child_relative_path + "/"):
                    continue
                child = FileSystemNode(entry.name, parent=node, is_dir=True)
                child_path = path / entry.name
                self.check_interrupted(child_path)
                try:
                    child_entries = self.file_system.list_dir(child_path)
                except OSError:
                    continue
                self._add_children(child, child_path, child_relative_path + "/", child_entries)
            else:
                if self._is_excluded(child_relative_path):
                    continue
                FileSystemNode(entry.name, parent=node, is_dir=False)

    def _is_excluded(self, relative_path: str) -> bool:
        return self.exclusion_rules is not None and self.exclusion_rules.exclude(relative_path)

    def get_file_count(self) -> int:
        """Get the number of files in the tree, excluding those filtered by exclusion rules."""
        return sum(1 for node in self.get_tree().descendants if not node.is_dir)

    def get_directory_count(self) -> int:
        """Get the number of directories in the tree, excluding the root."""
        return sum(1 for node in self.get_tree().descendants if node.is_dir)

    def iterate_files(self) -> Iterator[Tuple[str, str]]:
        """Iterate over all files in the tree in depth-first pre-order.

        Files come out in the same order they appear in the tree listing.

        Yields:
            Pairs of (absolute_path, relative_path) for each file. Relative paths use
            forward slashes.

        Example:
            >>> tree = FileSystemTree("src")  # doctest: +SKIP
            >>> for abs_path, rel_path in tree.iterate_files():  # doctest: +SKIP
            ...     print(rel_path)
            utils/helpers.py
            main.py
        """
        for node in PreOrderIter(self.get_tree(), filter_=lambda n: not n.is_dir):
            relative_path = node.relative_path
            yield (str(self.root_path.joinpath(*relative_path.split("/"))), relative_path)

    def stream_tree_representation(self, prefix: str = "") -> Iterator[str]:
        """Generate the indented tree listing one line at a time.

        The root itself is not listed. Each directory produces "<prefix>📁 <name>/" and
        its children are listed with the prefix extended by two spaces; each file produces
        "<prefix>📄 <name>". Lines are yielded without trailing newlines.

        Args:
            prefix: Prefix for the first level of entries. Defaults to "".
        """

        def write_children(node: FileSystemNode, current_prefix: str) -> Iterator[str]:
            for child in node.children:
                if child.is_dir:
                    yield f"{current_prefix}{DIRECTORY_MARKER} {child.name}/"
                    yield from write_children(child, current_prefix + INDENT)
                else:
                    yield f"{current_prefix}{FILE_MARKER} {child.name}"

        yield from write_children(self.get_tree(), prefix)

    def get_tree_representation(self, prefix: str = "") -> str:
        """Get the complete tree listing, one newline-terminated line per entry.

        An empty directory produces an empty string.
        """
        return "".join(f"{line}\n" for line in self.stream_tree_representation(prefix))

    def refresh(self) -> None:
        """Discard the cached tree so the next access reflects the current filesystem."""
        self._tree = None


def render_tree(
    root_dir: PathType,
    prefix: str = "",
    exclusion_rules: Optional[BaseExclusionRules] = None,
    file_system: Optional[BaseFileSystem] = None,
) -> str:
    """Render the indented tree listing of a directory.

    Without exclusion_rules the built-in default exclusions apply. Pass
    SegmentExclusionRules(include_defaults=False) to list everything.

    Example:
        >>> print(render_tree("src"), end="")  # doctest: +SKIP
        📁 dir2clip/
          📄 __init__.py
    """
    rules = exclusion_rules if exclusion_rules is not None else SegmentExclusionRules()
    return FileSystemTree(root_dir, rules, file_system).get_tree_representation(prefix)
