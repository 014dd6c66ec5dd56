"""Core infrastructure components."""

from dummy_file_creator.core.exceptions import (
    DummyFileError,
    GenerationParameterError,
    InvalidSizeError,
)

__all__ = ["DummyFileError", "GenerationParameterError", "InvalidSizeError"]
