"""Safe output writing utilities for the project-tree CLI.

This module provides a writing interface that reports a closed output pipe
as BrokenPipeError, so the CLI can stop quietly when piped into e.g. `head`.
"""

import errno
import os
import types
from pathlib import Path
from typing import Optional, Type, Union


class SafeWriter:
    """Writes UTF-8 text to a file descriptor or a file path.

    Attributes:
        file: Either a file path or file descriptor for output.
        fd: The actual file descriptor being written to.
    """

    def __init__(self, file: Union[int, Path]):
        """Initialize the safe writer.

        Args:
            file: Either a file descriptor (int) or a path opened for writing.

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
        """Write all of data.

        Args:
            data: String data to write.

        Raises:
            BrokenPipeError: If the reading end of the pipe was closed.
            OSError: If any other I/O error occurs during writing.
            ValueError: If attempting to write to a closed writer.
        """
        if self._closed:
            raise ValueError("Cannot write to closed SafeWriter")

        encoded = data.encode("utf-8")
        try:
            while encoded:
                written = os.write(self.fd, encoded)
                encoded = encoded[written:]
        except OSError as e:
            if e.errno == errno.EPIPE:
                raise BrokenPipeError() from e
            raise

    def close(self) -> None:
        """Close the file if it was opened by this class.

        The writer is marked as closed even if closing fails with a broken pipe.
        """
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
        """Close resources, letting an exception from the with block take priority."""
        try:
            self.close()
        except OSError:
            if exc_type is None:
                raise
