"""Node representation for file system elements in the tree."""

from typing import Any, Optional

from anytree import Node


class FileSystemNode(Node):  # type: ignore
    """Node class representing a file or directory in the filesystem tree.

    Extends anytree.Node with a flag telling directories from files. Tree traversal
    and path helpers are inherited from anytree.

    Attributes:
        name (str): The base name of the file or directory.
        parent (Optional[FileSystemNode]): The parent node in the tree.
        is_dir (bool): True if this node represents a directory.

    Example:
        >>> root = FileSystemNode("root", is_dir=True)
        >>> child = FileSystemNode("notes.md", parent=root)
        >>> child.is_dir
        False
        >>> child.relative_path
        'notes.md'
    """

    def __init__(
        self,
        name: str,
        parent: Optional["FileSystemNode"] = None,
        is_dir: bool = False,
        **kwargs: Any,
    ) -> None:
        super().__init__(name, parent, **kwargs)
        self.is_dir = is_dir

    @property
    def relative_path(self) -> str:
        """Path of this node relative to the tree root, using forward slashes."""
        return "/".join(node.name for node in self.path[1:])
