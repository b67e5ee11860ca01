"""Signal-aware output writing for the appletree CLI."""

import errno
import os
import types
from typing import Optional, Type

from appletree.cli.signal_handler import signal_handler


class SafeWriter:
    """Writes text straight to a file descriptor, stopping on interruption.

    Output bypasses Python's buffered streams so that a closed pipe is noticed
    on the write that hits it, and no buffered data is flushed at exit.

    Attributes:
        fd: The file descriptor being written to. It is not closed by the writer.
        encoding: Text encoding used for output.
        errors: Encoding error handler. Names that are not valid in the filesystem
            encoding arrive from os.listdir with surrogate escapes; the default
            "surrogateescape" writes their original bytes back out.
    """

    def __init__(self, fd: int, encoding: str = "utf-8", errors: str = "surrogateescape") -> None:
        if not isinstance(fd, int):
            raise TypeError(f"Expected a file descriptor, got {type(fd).__name__}")
        self.fd = fd
        self.encoding = encoding
        self.errors = errors
        self._closed = False

    def write(self, data: str) -> None:
        """Write a string.

        Raises:
            BrokenPipeError: If SIGPIPE/SIGINT was received or the pipe is broken.
            OSError: If another I/O error occurs during writing.
            ValueError: If attempting to write to a closed writer.
        """
        if self._closed:
            raise ValueError("Cannot write to closed SafeWriter")

        if signal_handler.interrupted():
            raise BrokenPipeError()

        payload = data.encode(self.encoding, self.errors)
        try:
            # os.write may write fewer bytes than requested to pipes
            while payload:
                written = os.write(self.fd, payload)
                payload = payload[written:]
        except OSError as e:
            if e.errno == errno.EPIPE:
                raise BrokenPipeError()
            raise

    def close(self) -> None:
        """Mark the writer as closed. The descriptor itself stays open."""
        self._closed = True

    @property
    def closed(self) -> bool:
        return self._closed

    def __enter__(self) -> "SafeWriter":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        self.close()
