"""Directory and file snapshot utilities for the clipboard.

This package renders a file, or a directory tree together with the contents of
its text files, as a single block of text suitable for pasting into chats and
documentation.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("dir2clip")
except PackageNotFoundError:
    __version__ = "unknown"
