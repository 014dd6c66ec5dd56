#!/usr/bin/env python3
"""
Dummy File Generation Tool.

Creates a file of the requested size filled with random text or zeros,
showing a progress bar while writing.

Usage:
    dummy-file-creator --file out.bin --size 100MB
    dummy-file-creator -f out.bin -s 1GB -b 5MB --fillWithZeros
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.table import Table

from dummy_file_creator.config import (
    ConfigurationError,
    get_settings,
    load_settings_file,
)
from dummy_file_creator.core.exceptions import DummyFileError
from dummy_file_creator.logging import get_logger, setup_logging
from dummy_file_creator.progress import ProgressReporter
from dummy_file_creator.services.byte_size import format_size
from dummy_file_creator.services.dummy_file import build_request, generate

if TYPE_CHECKING:
    from collections.abc import Sequence

    from dummy_file_creator.config import Settings
    from dummy_file_creator.schemas import GenerationRequest, GenerationResult

console = Console()
error_console = Console(stderr=True)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="dummy-file-creator",
        description="Dummy File Generation Tool.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Sizes are a number followed by B, KB, MB, GB, TB or PB (powers of 1024).

Examples:
  dummy-file-creator --file dummy.txt --size 10KB --buffer 5KB --fillWithZeros
  dummy-file-creator -f dummy.bin -s 1.5GB
        """,
    )
    parser.add_argument(
        "--file",
        "-f",
        type=Path,
        required=True,
        help="Full path of the file to be generated",
    )
    parser.add_argument(
        "--size",
        "-s",
        type=str,
        default=None,
        help='Size of the file to be generated (default from config, "10MB")',
    )
    parser.add_argument(
        "--buffer",
        "-b",
        type=str,
        default=None,
        help='Buffer size used while generating (default from config, "10MB")',
    )
    parser.add_argument(
        "--fillWithZeros",
        "-z",
        dest="fill_with_zeros",
        action="store_true",
        default=None,
        help="Fill with zeros instead of a random string",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Configuration file (overrides DUMMY_FILE_CREATOR_CONFIG)",
    )
    return parser.parse_args(argv)


def load_cli_settings(args: argparse.Namespace) -> Settings:
    """Load settings from --config when given, otherwise the resolved default."""
    if args.config is not None:
        return load_settings_file(args.config)
    return get_settings()


def print_summary(request: GenerationRequest, result: GenerationResult) -> None:
    """Print a summary table for a finished run."""
    table = Table(title="Dummy File Created")
    table.add_column("Property", style="cyan")
    table.add_column("Value")

    table.add_row("File", escape(result.path))
    table.add_row("Requested", format_size(request.total_bytes))
    table.add_row("Written", f"{format_size(result.bytes_written)} ({result.bytes_written:,} bytes)")
    table.add_row("Buffer", format_size(request.chunk_bytes))
    table.add_row("Chunks", f"{result.chunk_count:,}")
    table.add_row("Fill", result.fill_mode.value)
    table.add_row("Duration", f"{result.elapsed_seconds:.1f}s")

    console.print(table)


async def run(request: GenerationRequest, reporter: ProgressReporter) -> GenerationResult:
    """Generate the file while rendering the reporter's events as a progress bar."""
    description = f"{request.target_path} ({format_size(request.total_bytes)})"

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        TimeElapsedColumn(),
        console=console,
    ) as progress:
        task = progress.add_task(escape(description), total=100)
        unsubscribe = reporter.subscribe(
            lambda info: progress.update(task, completed=info.percentage)
        )
        try:
            reporter.report_starting(description)
            try:
                result = await generate(request, reporter.progress_callback(description))
            except Exception as e:
                await reporter.report_failed(f"Failed to create {request.target_path}", error=e)
                raise
            await reporter.report_completed(f"Created {request.target_path}")
        finally:
            unsubscribe()

    return result


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    try:
        settings = load_cli_settings(args)
    except ConfigurationError as e:
        error_console.print(f"[red]FATAL: Configuration error\n{escape(str(e))}[/red]")
        return 1

    setup_logging(settings.logging.level, log_format=settings.logging.format)
    logger = get_logger(__name__)
    logger.debug("Configuration loaded", extra={"config": settings.model_dump()})

    generation = settings.generation
    size = args.size if args.size is not None else generation.default_size
    buffer = args.buffer if args.buffer is not None else generation.default_buffer_size
    fill_with_zeros = (
        args.fill_with_zeros if args.fill_with_zeros is not None else generation.fill_with_zeros
    )

    try:
        request = build_request(args.file, size, buffer, fill_with_zeros)
    except DummyFileError as e:
        error_console.print(f"[red]Error: {escape(e.message)}[/red]")
        return 1

    reporter = ProgressReporter(settings.progress.completion_delay_seconds)

    try:
        result = asyncio.run(run(request, reporter))
    except OSError as e:
        error_console.print(
            f"[red]Error: Failed to write {escape(request.target_path)}: {escape(str(e))}[/red]"
        )
        return 1
    except DummyFileError as e:
        error_console.print(f"[red]Error: {escape(e.message)}[/red]")
        return 1

    print_summary(request, result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
