"""
Chunked writer for dummy file content.

Owns the output file handle for one generation run. Writes run in a
worker thread so the calling event loop is never blocked on disk I/O.
"""

from __future__ import annotations

import asyncio
import threading
from pathlib import Path
from typing import TYPE_CHECKING, Any

from dummy_file_creator.services.random_text import MAX_LENGTH, generate

if TYPE_CHECKING:
    from typing import BinaryIO

ZERO_FILL = b"\x00"


def random_text(n: int) -> bytes:
    """Build ``n`` bytes of random ASCII text from generator-sized pieces."""
    pieces: list[str] = []
    remaining = n
    while remaining > 0:
        sub_len = min(MAX_LENGTH, remaining)
        pieces.append(generate(sub_len, sub_len // 4))
        remaining -= sub_len
    return "".join(pieces).encode("ascii")


class ChunkWriter:
    """
    Buffered binary writer for a single output file.

    The file is created or truncated on construction. Release happens
    exactly once no matter how many times, or from which context,
    ``close``/``aclose`` are called.

    Usage:
        async with ChunkWriter(path, buffer_size=1024) as writer:
            await writer.write_zero_chunk(1024)
    """

    def __init__(self, path: str | Path, buffer_size: int) -> None:
        """
        Open the output file.

        Args:
            path: File to create or truncate
            buffer_size: Size in bytes of the underlying write buffer

        Raises:
            ValueError: If buffer_size is not positive
            OSError: If the file cannot be opened for writing
        """
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")

        self.path = Path(path)
        self.buffer_size = buffer_size
        # Binary mode has no line buffering, so a 1-byte buffer uses the default.
        buffering = buffer_size if buffer_size > 1 else -1
        self._file: BinaryIO | None = self.path.open("wb", buffering=buffering)
        self._release_lock = threading.Lock()
        self._released = False
        self._bytes_written = 0

    def __enter__(self) -> ChunkWriter:
        return self

    def __exit__(self, *_args: Any) -> None:
        self.close()

    async def __aenter__(self) -> ChunkWriter:
        return self

    async def __aexit__(self, *_args: Any) -> None:
        await self.aclose()

    @property
    def closed(self) -> bool:
        """Whether the file handle has been released."""
        return self._released

    @property
    def bytes_written(self) -> int:
        """Total bytes handed to the file so far."""
        return self._bytes_written

    @property
    def file(self) -> BinaryIO:
        if self._file is None:
            raise RuntimeError(f"ChunkWriter for {self.path} is closed")
        return self._file

    async def write_zero_chunk(self, n: int) -> int:
        """
        Write ``n`` zero bytes.

        Returns:
            Number of bytes written (always ``n``)
        """
        self._check_count(n)
        if n == 0:
            return 0
        return await asyncio.to_thread(self._write, ZERO_FILL * n)

    async def write_random_chunk(self, n: int) -> int:
        """
        Write ``n`` bytes of random printable text.

        The text is produced in pieces of at most 128 characters, each with
        at least a quarter punctuation.

        Returns:
            Number of bytes written (always ``n``)
        """
        self._check_count(n)
        if n == 0:
            return 0
        return await asyncio.to_thread(lambda: self._write(random_text(n)))

    def close(self) -> None:
        """Flush and release the file. Later calls do nothing."""
        self._release()

    async def aclose(self) -> None:
        """Flush and release the file without blocking the event loop."""
        if self._released:
            return
        await asyncio.to_thread(self._release)

    def _check_count(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"Byte count must not be negative, got {n}")
        # Raises once released, even for empty writes.
        _ = self.file

    def _write(self, data: bytes) -> int:
        written = self.file.write(data)
        self._bytes_written += written
        return written

    def _release(self) -> None:
        with self._release_lock:
            if self._released:
                return
            self._released = True
            handle, self._file = self._file, None

        if handle is not None:
            handle.close()
