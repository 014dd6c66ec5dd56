"""
Pydantic models describing a dummy file generation run.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from dummy_file_creator.progress import calculate_percentage


class FillMode(str, Enum):
    """Content written into the dummy file."""

    ZERO = "zero"
    RANDOM = "random"

    @classmethod
    def from_flag(cls, fill_with_zeros: bool) -> FillMode:
        return cls.ZERO if fill_with_zeros else cls.RANDOM


class GenerationRequest(BaseModel):
    """A validated request to generate one dummy file."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    target_path: str
    """File to create or overwrite."""

    total_bytes: int = Field(ge=0)
    """Requested file size in bytes."""

    chunk_bytes: int = Field(gt=0)
    """Bytes written per chunk; also the write buffer size."""

    fill_mode: FillMode
    """Zero bytes or random text."""


class ProgressSample(BaseModel):
    """Bytes written so far against the requested total."""

    model_config = ConfigDict(frozen=True)

    bytes_written: int = Field(ge=0)
    total_bytes: int = Field(ge=0)

    @property
    def percentage(self) -> float:
        """Completion in percent, clamped to [0, 100]."""
        return calculate_percentage(self.bytes_written, self.total_bytes)


class GenerationResult(BaseModel):
    """Summary returned once a dummy file has been written."""

    model_config = ConfigDict(extra="forbid")

    path: str
    """Path of the generated file."""

    total_bytes: int
    """Requested size in bytes."""

    bytes_written: int
    """Bytes actually written."""

    chunk_count: int
    """Number of chunks written."""

    fill_mode: FillMode
    """Content written into the file."""

    elapsed_seconds: float
    """Wall-clock duration of the write loop."""
