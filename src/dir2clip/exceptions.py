class NotReadableError(Exception):
    """
    Exception raised when a file given directly as the target cannot be copied.

    This happens when the file is classified as binary or when reading it fails. Files
    encountered while walking a directory never raise this exception; they are simply
    left out of the snapshot.

    Attributes:
        path (str): Path to the file that could not be read.
        reason (str): Human-readable description of the failure.

    Example:
        >>> error = NotReadableError("/path/to/image.dat", "binary content")
        >>> str(error)
        'Cannot read /path/to/image.dat: binary content'
    """

    def __init__(self, path: str, reason: str = "file is binary or unreadable") -> None:
        """
        Initialize the exception with the offending path and a reason.

        Args:
            path (str): Path to the file that could not be read.
            reason (str, optional): Description of the failure. Defaults to
                "file is binary or unreadable".
        """
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read {path}: {reason}")


class StatFailureError(Exception):
    """
    Exception raised when the target path cannot be inspected.

    Raised when the target does not exist, when permission to inspect it is denied, or
    when the target directory itself cannot be listed.

    Attributes:
        path (str): The target path.
        reason (str): Human-readable description of the failure.

    Example:
        >>> error = StatFailureError("/missing", "No such file or directory")
        >>> str(error)
        'Cannot access /missing: No such file or directory'
    """

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot access {path}: {reason}")


class ClipboardUnavailableError(Exception):
    """
    Exception raised when no clipboard mechanism is available on this system.

    On Linux this usually means none of xclip, xsel or wl-clipboard is installed. The
    snapshot can still be obtained with the -p/--print or -o/--output options.

    Example:
        >>> error = ClipboardUnavailableError("no copy/paste mechanism found")
        >>> str(error).startswith('Clipboard is not available')
        True
    """

    def __init__(self, message: str = "no copy/paste mechanism found") -> None:
        self.message = (
            f"Clipboard is not available: {message}. Use -p/--print or -o/--output to write the snapshot elsewhere."
        )
        super().__init__(self.message)


class WalkInterruptedError(Exception):
    """
    Exception raised when a directory walk is cancelled before it completes.

    The walk checks for cancellation before listing each directory and before reading
    each file, so a Ctrl+C on a large tree takes effect at the next entry instead of
    after the whole tree has been read.

    Attributes:
        path (str): The entry that was about to be processed.

    Example:
        >>> error = WalkInterruptedError("/proj/src")
        >>> str(error)
        'Interrupted while reading /proj/src'
    """

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Interrupted while reading {path}")
