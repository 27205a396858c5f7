"""File content printer producing fenced file blocks.

This module turns the files of a FileSystemTree into file blocks: the file name,
then the decoded content between a pair of ``` fences. Binary and unreadable files
found while walking a directory are skipped without error; a file read directly
through read_text_file() raises NotReadableError instead.
"""

from pathlib import Path
from typing import Iterator, Optional, Tuple

from .exceptions import NotReadableError
from .exclusion_rules.base_rules import BaseExclusionRules
from .exclusion_rules.segment_rules import SegmentExclusionRules
from .file_system_tree.binary_detector import SNIFF_SIZE, is_binary, is_binary_file
from .file_system_tree.file_system import BaseFileSystem, LocalFileSystem
from .file_system_tree.file_system_tree import FileSystemTree
from .types import PathType

FENCE = "```"


def format_file_block(name: str, content: str) -> str:
    """Format one file's contribution to a snapshot.

    Example:
        >>> format_file_block("a.txt", "hello")
        'a.txt\\n```\\nhello\\n```\\n\\n'
    """
    return f"{name}\n{FENCE}\n{content}\n{FENCE}\n\n"


def read_text_file(
    file_path: PathType,
    file_system: Optional[BaseFileSystem] = None,
    encoding: str = "utf-8",
    errors: str = "replace",
) -> str:
    """Read a file as text, refusing binary content.

    Args:
        file_path: Path to the file.
        file_system: Filesystem to read from. Defaults to the local disk.
        encoding: Encoding used to decode the bytes. Defaults to "utf-8".
        errors: Decode error handler. Defaults to "replace", so invalid sequences become
            U+FFFD rather than failing.

    Returns:
        The decoded file content.

    Raises:
        NotReadableError: If the file looks binary or cannot be read.
    """
    fs = file_system if file_system is not None else LocalFileSystem()
    path = Path(file_path)

    try:
        if is_binary(fs.read_bytes(path, SNIFF_SIZE)):
            raise NotReadableError(str(path), "file appears to be binary")
        data = fs.read_bytes(path)
    except OSError as e:
        raise NotReadableError(str(path), e.strerror or str(e)) from e

    return data.decode(encoding, errors=errors)


class FileContentPrinter:
    """Produces file blocks for every text file in a filesystem tree.

    Files are visited in the tree's depth-first order, so blocks line up with the tree
    listing. Each file is sniffed for binary content first; binary files and files that
    fail to read are left out silently, which keeps a single bad file from aborting the
    copy of a large tree.

    Attributes:
        fs_tree (FileSystemTree): The filesystem tree to process.
        encoding (str): The encoding used to decode file content.
        errors (str): How decoding errors are handled.
        skipped_files (int): Number of files left out during the last pass.

    Example:
        >>> import tempfile
        >>> from pathlib import Path
        >>> with tempfile.TemporaryDirectory() as tmpdir:
        ...     root = Path(tmpdir)
        ...     _ = (root / "a.txt").write_text("hello")
        ...     _ = (root / "b.dat").write_bytes(b"\\x00\\x01")
        ...     printer = FileContentPrinter(FileSystemTree(root))
        ...     print(printer.get_contents(), end="")
        ...     printer.skipped_files
        a.txt
        ```
        hello
        ```
        <BLANKLINE>
        1
    """

    def __init__(
        self,
        fs_tree: FileSystemTree,
        encoding: str = "utf-8",
        errors: str = "replace",
    ) -> None:
        """Initialize the FileContentPrinter.

        Args:
            fs_tree: The filesystem tree to process.
            encoding: The encoding to use when decoding files. Defaults to "utf-8".
            errors: How to handle decoding errors. Must be one of "strict", "ignore" or
                "replace". Defaults to "replace".

        Raises:
            ValueError: If errors is not one of "strict", "ignore" or "replace".
            LookupError: If the specified encoding is not available.
        """
        if errors not in ("strict", "ignore", "replace"):
            raise ValueError(f"Invalid error handler '{errors}'. Must be one of: strict, ignore, replace")

        try:
            "test".encode(encoding).decode(encoding)
        except LookupError as e:
            raise LookupError(f"Encoding '{encoding}' is not available") from e

        self.fs_tree = fs_tree
        self.encoding = encoding
        self.errors = errors
        self.skipped_files = 0

    def _read_content(self, file_path: Path) -> Optional[str]:
        """Return a file's decoded content, or None if it should be skipped."""
        file_system = self.fs_tree.file_system
        if is_binary_file(file_path, file_system):
            return None
        try:
            return file_system.read_bytes(file_path).decode(self.encoding, errors=self.errors)
        except (OSError, UnicodeDecodeError):
            return None

    def yield_file_blocks(self) -> Iterator[Tuple[str, str, str]]:
        """Yield a formatted block for each text file in the tree.

        Yields:
            Tuples of (absolute_path, relative_path, block).

        Raises:
            WalkInterruptedError: If the tree's interrupt check fires before a file is read.
        """
        self.skipped_files = 0
        for file_path, relative_path in self.fs_tree.iterate_files():
            path = Path(file_path)
            self.fs_tree.check_interrupted(path)
            content = self._read_content(path)
            if content is None:
                self.skipped_files += 1
                continue
            yield file_path, relative_path, format_file_block(path.name, content)

    def get_contents(self) -> str:
        """Concatenate all file blocks in traversal order."""
        return "".join(block for _, _, block in self.yield_file_blocks())


def collect(
    root_dir: PathType,
    exclusion_rules: Optional[BaseExclusionRules] = None,
    file_system: Optional[BaseFileSystem] = None,
) -> str:
    """Collect the file blocks of every text file beneath a directory.

    Without exclusion_rules the built-in default exclusions apply.

    Example:
        >>> print(collect("src"), end="")  # doctest: +SKIP
        __init__.py
        ```
        ...
        ```
    """
    rules = exclusion_rules if exclusion_rules is not None else SegmentExclusionRules()
    return FileContentPrinter(FileSystemTree(root_dir, rules, file_system)).get_contents()
