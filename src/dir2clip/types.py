from enum import Enum
from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class EntryKind(Enum):
    """Enumeration of filesystem entry kinds encountered during traversal.

    Symbolic links are not a kind of their own: an entry is classified by what
    the filesystem reports for it without following links, so a link to a
    directory is a FILE during traversal.

    Attributes:
        FILE: Anything that is not a directory
        DIRECTORY: Directory
    """

    FILE = "file"
    DIRECTORY = "directory"
