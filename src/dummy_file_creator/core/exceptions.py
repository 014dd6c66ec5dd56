"""
Exception hierarchy for dummy file generation.

I/O failures are not wrapped: they propagate as the built-in ``OSError``
family so callers can handle them the usual way.
"""

from __future__ import annotations


class DummyFileError(Exception):
    """
    Base exception for dummy file generation errors.

    Attributes:
        error: Machine-readable error code
        message: Human-readable description
        details: Additional context
    """

    # nosemgrep: no-default-parameter-values (optional details for exceptions)
    def __init__(
        self,
        error: str,
        message: str,
        details: dict[str, object] | None = None,
    ) -> None:
        self.error = error
        self.message = message
        if details is None:
            self.details: dict[str, object] = {}
        else:
            self.details = details
        super().__init__(message)


class InvalidSizeError(DummyFileError, ValueError):
    """
    Raised when a byte size argument cannot be used.

    Covers size text that does not parse as well as parsed values that are
    out of range (a negative size, or a zero buffer size). Always raised
    before the output file is opened.
    """

    def __init__(self, parameter: str, text: object, reason: str | None = None) -> None:
        self.parameter = parameter
        self.text = text
        if reason is None:
            reason = "expected a number followed by one of B, KB, MB, GB, TB, PB"
        super().__init__(
            error="invalid_size",
            message=f"Invalid value for {parameter}: {text!r} ({reason})",
            details={"parameter": parameter, "value": str(text)},
        )


class GenerationParameterError(DummyFileError, ValueError):
    """
    Raised when random text is requested with out-of-range arguments.

    Only internal miscomputation of chunk sizes can trigger this; user input
    never reaches the generator unchecked.
    """

    def __init__(self, parameter: str, value: int, valid_range: str) -> None:
        self.parameter = parameter
        self.value = value
        super().__init__(
            error="invalid_generation_parameter",
            message=f"{parameter} must be in {valid_range}, got {value}",
            details={"parameter": parameter, "value": value, "range": valid_range},
        )
