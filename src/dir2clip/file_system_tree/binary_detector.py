"""Binary file detection utilities."""

from pathlib import Path
from typing import Optional

from dir2clip.file_system_tree.file_system import BaseFileSystem, LocalFileSystem
from dir2clip.types import PathType

# Number of leading bytes inspected when classifying a file
SNIFF_SIZE = 8192


def is_binary(data: bytes, sniff_size: int = SNIFF_SIZE) -> bool:
    """Classify a byte buffer as binary if its leading bytes contain a null byte.

    Only the first `sniff_size` bytes are inspected. Empty data is text.

    Example:
        >>> is_binary(b"plain text\\n")
        False
        >>> is_binary(b"abcd\\x00efgh")
        True
        >>> is_binary(b"")
        False
        >>> is_binary(b"a" * 10 + b"\\x00", sniff_size=10)
        False
    """
    return b"\0" in data[:sniff_size]


def is_binary_file(
    file_path: PathType, file_system: Optional[BaseFileSystem] = None, sniff_size: int = SNIFF_SIZE
) -> bool:
    """Detect if a file is binary by looking for a null byte in its first bytes.

    This is a heuristic: a file with a null byte only after the sampled region is
    classified as text. A file that cannot be read at all is classified as binary so
    that unreadable content is never emitted.

    Args:
        file_path: Path to the file to analyze.
        file_system: Filesystem to read from. Defaults to the local disk.
        sniff_size: Number of bytes to inspect. Defaults to 8192.

    Returns:
        True if the file appears to be binary or cannot be read, False otherwise.

    Example:
        >>> is_binary_file("/path/that/does/not/exist")
        True
    """
    fs = file_system if file_system is not None else LocalFileSystem()
    try:
        chunk = fs.read_bytes(Path(file_path), sniff_size)
    except OSError:
        return True
    return is_binary(chunk, sniff_size)
