"""Safe output writing utilities for dir2clip CLI.

Used when the snapshot goes to stdout or a file instead of the clipboard.
"""

import errno
import os
import types
from pathlib import Path
from typing import Optional, Type, Union

from dir2clip.cli.signal_handler import signal_handler


class SafeWriter:
    """Signal-aware writer for a file descriptor or a file path.

    Attributes:
        file: Either a file path or file descriptor for output.
        fd: The actual file descriptor being written to.
    """

    def __init__(self, file: Union[int, str, os.PathLike]):  # type: ignore[type-arg]
        """Initialize the safe writer.

        Args:
            file: Either a file descriptor (int) or a path to open for writing.

        Raises:
            TypeError: If file is neither an int nor path-like.
        """
        self.file = file
        self._closed = False

        if isinstance(file, int):
            self.fd = file
            self._file_obj = None
        elif isinstance(file, (str, os.PathLike)):
            self._file_obj = Path(file).open("w", encoding="utf-8")
            self.fd = self._file_obj.fileno()
        else:
            raise TypeError(f"Expected int, str, or PathLike, got {type(file).__name__}")

    def write(self, data: str) -> None:
        """Write all of data, encoded as UTF-8.

        Raises:
            BrokenPipeError: If SIGPIPE or SIGINT was received or the pipe is broken.
            OSError: If an I/O error occurs during writing.
            ValueError: If attempting to write to a closed writer.
        """
        if self._closed:
            raise ValueError("Cannot write to closed SafeWriter")

        if signal_handler.interrupted():
            raise BrokenPipeError()

        payload = data.encode("utf-8")
        try:
            # os.write may write fewer bytes than requested
            while payload:
                written = os.write(self.fd, payload)
                payload = payload[written:]
        except OSError as e:
            if e.errno == errno.EPIPE:
                raise BrokenPipeError()
            raise

    def close(self) -> None:
        """Close the file if this writer opened it. Broken pipe errors on close are ignored."""
        if self._closed:
            return

        if self._file_obj is not None:
            try:
                self._file_obj.close()
            except OSError as e:
                if e.errno != errno.EPIPE:
                    raise

        self._closed = True

    def __enter__(self) -> "SafeWriter":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        """Close the writer, letting an exception from the with block take priority."""
        try:
            self.close()
        except OSError:
            if exc_type is None:
                raise
