"""
Random printable text generation.

Produces ASCII strings from a cryptographically strong source with a
guaranteed minimum number of punctuation characters.
"""

from __future__ import annotations

import secrets
import string

from dummy_file_creator.core.exceptions import GenerationParameterError

MAX_LENGTH = 128

PUNCTUATIONS = "!@#$%^&*()_-+=[{]};:>|./?"

# 10 digits + 26 upper + 26 lower + 25 punctuation
_ALPHABET = string.digits + string.ascii_uppercase + string.ascii_lowercase + PUNCTUATIONS
_ALPHABET_SIZE = len(_ALPHABET)

# Maps every random byte straight to its character (byte % 87).
_BYTE_TO_CHAR = bytes(ord(_ALPHABET[i % _ALPHABET_SIZE]) for i in range(256))

_ALPHANUMERIC = (string.digits + string.ascii_letters).encode("ascii")


def generate(length: int, min_non_alphanumeric: int) -> str:
    """
    Generate a random string of printable ASCII characters.

    Args:
        length: Number of characters, 1 to 128 inclusive
        min_non_alphanumeric: Minimum number of punctuation characters,
            0 to ``length`` inclusive

    Returns:
        Random string of exactly ``length`` characters

    Raises:
        GenerationParameterError: If either argument is out of range
    """
    if not 1 <= length <= MAX_LENGTH:
        raise GenerationParameterError("length", length, f"[1, {MAX_LENGTH}]")
    if not 0 <= min_non_alphanumeric <= length:
        raise GenerationParameterError(
            "min_non_alphanumeric", min_non_alphanumeric, f"[0, {length}]"
        )

    buffer = bytearray(secrets.token_bytes(length).translate(_BYTE_TO_CHAR))
    count = len(buffer.translate(None, _ALPHANUMERIC))

    if count >= min_non_alphanumeric:
        return buffer.decode("ascii")

    for _ in range(min_non_alphanumeric - count):
        while True:
            index = secrets.randbelow(length)
            if buffer[index] in _ALPHANUMERIC:
                break
        buffer[index] = ord(secrets.choice(PUNCTUATIONS))

    return buffer.decode("ascii")
