"""
Dummy File Creator - disposable test fixture generation.

Creates files of a requested size filled with zero bytes or random
printable text, writing in fixed-size chunks and reporting progress.
"""

from __future__ import annotations

from dummy_file_creator.services.byte_size import format_size, parse_size
from dummy_file_creator.services.dummy_file import create

__all__ = ["create", "format_size", "parse_size"]
