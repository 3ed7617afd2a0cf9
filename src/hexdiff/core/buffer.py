"""
Buffer module for holding the named, read-only byte data being compared.
"""

import mmap
import os
from typing import BinaryIO, Optional, Union

from ..utils.hex_utils import byte_at

ByteSource = Union[bytes, bytearray, memoryview, mmap.mmap]


def display_name(filename: str) -> str:
    """
    Make a file name safe to print.

    Names that are not valid in the filesystem encoding arrive with
    surrogate escapes; their undecodable bytes become U+FFFD.
    """

    return os.fsencode(filename).decode("utf-8", errors="replace")


class InputBuffer:
    """A named, read-only sequence of bytes supplied for comparison."""

    LARGE_FILE_SIZE = 10 * 1024 * 1024

    def __init__(self, name: str, data: ByteSource = b'') -> None:
        self.name = name
        self.data = data
        self.file: Optional[BinaryIO] = None

    @classmethod
    def from_file(cls, filename: str) -> 'InputBuffer':
        """
        Load a buffer from a file.

        Files above LARGE_FILE_SIZE are memory mapped rather than read,
        and must be released with close().

        Args:
            filename: Path of the file to load

        Returns:
            InputBuffer named after the printable form of the path
        """

        file_size = os.path.getsize(filename)

        if file_size > cls.LARGE_FILE_SIZE:
            buf = cls(display_name(filename))
            buf.file = open(filename, 'rb')
            try:
                buf.data = mmap.mmap(buf.file.fileno(), 0, access=mmap.ACCESS_READ)
            except (OSError, ValueError):
                buf.close()
                raise
            return buf

        with open(filename, 'rb') as f:
            return cls(display_name(filename), f.read())

    @classmethod
    def from_stream(cls, stream: BinaryIO, name: str = 'stdin') -> 'InputBuffer':
        """Read a binary stream to its end into a buffer."""

        return cls(name, stream.read())

    def byte_at(self, offset: int) -> Optional[int]:
        """Get the byte at offset, or None past the end of the buffer."""

        return byte_at(self.data, offset)

    def __len__(self) -> int:
        return len(self.data)

    def close(self) -> None:
        """Release the memory map and file handle of a large file."""

        if isinstance(self.data, mmap.mmap):
            self.data.close()
            self.data = b''

        if not self.file:
            return

        self.file.close()
        self.file = None

    def __enter__(self) -> 'InputBuffer':
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"InputBuffer(name={self.name!r}, size={len(self)})"
