"""
Dummy file generation engine.

Parses the requested sizes, then writes the file chunk by chunk through a
ChunkWriter, reporting progress after every chunk. Chunks are written
strictly one after another; the progress callback runs between chunks on
the calling task.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

from dummy_file_creator.core.exceptions import InvalidSizeError
from dummy_file_creator.logging import get_logger
from dummy_file_creator.schemas import FillMode, GenerationRequest, GenerationResult
from dummy_file_creator.services.byte_size import format_size, parse_size_or_raise
from dummy_file_creator.services.chunk_writer import ChunkWriter

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

    ProgressCallback = Callable[[int, int], None]

DEFAULT_BUFFER_SIZE_TEXT = "10MB"


def build_request(
    path: str | Path,
    total_size: str | int,
    buffer_size: str | int = DEFAULT_BUFFER_SIZE_TEXT,
    fill_with_zeros: bool = False,
) -> GenerationRequest:
    """
    Validate generation arguments without touching the filesystem.

    Args:
        path: File to create or overwrite
        total_size: Requested size as text ("100MB") or a byte count
        buffer_size: Chunk size as text or a byte count
        fill_with_zeros: Write zero bytes instead of random text

    Returns:
        Validated GenerationRequest

    Raises:
        InvalidSizeError: If a size is malformed, negative, or the buffer
            size is zero. The error names the offending parameter.
    """
    total_bytes = parse_size_or_raise(total_size, "total_size")
    chunk_bytes = parse_size_or_raise(buffer_size, "buffer_size")
    if chunk_bytes == 0:
        raise InvalidSizeError("buffer_size", buffer_size, reason="must be at least 1 byte")

    return GenerationRequest(
        target_path=str(path),
        total_bytes=total_bytes,
        chunk_bytes=chunk_bytes,
        fill_mode=FillMode.from_flag(fill_with_zeros),
    )


async def generate(
    request: GenerationRequest,
    on_progress: ProgressCallback | None = None,
) -> GenerationResult:
    """
    Write the file described by a validated request.

    The output is truncated first. If a write fails, the file handle is
    still released and whatever was written stays on disk.

    Raises:
        OSError: If the file cannot be opened or written
    """
    logger = get_logger(__name__)
    total_bytes = request.total_bytes
    bytes_written = 0
    chunk_count = 0
    start = time.perf_counter()

    logger.info(
        "Dummy file generation started",
        extra={
            "path": request.target_path,
            "total_bytes": total_bytes,
            "total_size": format_size(total_bytes),
            "chunk_bytes": request.chunk_bytes,
            "fill_mode": request.fill_mode.value,
        },
    )

    try:
        async with ChunkWriter(request.target_path, request.chunk_bytes) as writer:
            while bytes_written < total_bytes:
                chunk_size = min(request.chunk_bytes, total_bytes - bytes_written)
                if request.fill_mode is FillMode.ZERO:
                    bytes_written += await writer.write_zero_chunk(chunk_size)
                else:
                    bytes_written += await writer.write_random_chunk(chunk_size)
                chunk_count += 1

                if on_progress is not None:
                    on_progress(bytes_written, total_bytes)
    except Exception:
        logger.exception(
            "Dummy file generation failed",
            extra={
                "path": request.target_path,
                "bytes_written": bytes_written,
                "total_bytes": total_bytes,
            },
        )
        raise

    elapsed = time.perf_counter() - start
    logger.info(
        "Dummy file generation completed",
        extra={
            "path": request.target_path,
            "bytes_written": bytes_written,
            "chunk_count": chunk_count,
            "elapsed_seconds": round(elapsed, 3),
        },
    )

    return GenerationResult(
        path=request.target_path,
        total_bytes=total_bytes,
        bytes_written=bytes_written,
        chunk_count=chunk_count,
        fill_mode=request.fill_mode,
        elapsed_seconds=elapsed,
    )


async def create(
    path: str | Path,
    total_size: str | int,
    buffer_size: str | int = DEFAULT_BUFFER_SIZE_TEXT,
    fill_with_zeros: bool = False,
    on_progress: ProgressCallback | None = None,
) -> GenerationResult:
    """
    Create a dummy file of the requested size.

    Usage:
        await create("out.bin", "100MB", "1MB", fill_with_zeros=True)

    Args:
        path: File to create or overwrite
        total_size: Requested size as text ("100MB") or a byte count
        buffer_size: Chunk size as text or a byte count (default "10MB")
        fill_with_zeros: Write zero bytes instead of random text
        on_progress: Called with (bytes_written, total_bytes) after each chunk

    Returns:
        Summary of the generated file

    Raises:
        InvalidSizeError: If a size argument is unusable (no file is opened)
        OSError: If the file cannot be opened or written
    """
    request = build_request(path, total_size, buffer_size, fill_with_zeros)
    return await generate(request, on_progress)
