"""Unit tests for random text generation."""

from __future__ import annotations

import string
from unittest.mock import patch

import pytest

from dummy_file_creator.core.exceptions import GenerationParameterError
from dummy_file_creator.services.random_text import MAX_LENGTH, PUNCTUATIONS, generate

ALPHANUMERIC = set(string.ascii_letters + string.digits)
ALLOWED = ALPHANUMERIC | set(PUNCTUATIONS)


def count_non_alphanumeric(text: str) -> int:
    return sum(1 for c in text if c not in ALPHANUMERIC)


@pytest.mark.unit
class TestGenerate:
    """Tests for generate."""

    @pytest.mark.parametrize(
        ("length", "min_non_alphanumeric"),
        [(1, 0), (1, 1), (32, 0), (32, 16), (32, 32), (128, 0), (128, 64), (128, 128)],
    )
    def test_length_and_minimum(self, length: int, min_non_alphanumeric: int) -> None:
        """Result has the requested length and at least the minimum punctuation."""
        text = generate(length, min_non_alphanumeric)

        assert len(text) == length
        assert count_non_alphanumeric(text) >= min_non_alphanumeric

    def test_all_lengths_with_quarter_punctuation(self) -> None:
        """Every valid length honors the minimum used by the chunk writer."""
        for length in range(1, MAX_LENGTH + 1):
            text = generate(length, length // 4)

            assert len(text) == length
            assert count_non_alphanumeric(text) >= length // 4

    def test_only_uses_fixed_character_set(self) -> None:
        """Output is limited to digits, ASCII letters and the 25 punctuation marks."""
        text = "".join(generate(128, 32) for _ in range(50))

        assert set(text) <= ALLOWED
        assert text.isascii()

    def test_punctuation_set_has_25_characters(self) -> None:
        assert len(PUNCTUATIONS) == 25
        assert len(set(PUNCTUATIONS)) == 25

    def test_byte_mapping_classes(self) -> None:
        """Bytes map via byte % 87 onto digits, upper, lower, then punctuation."""
        raw = bytes([0, 9, 10, 35, 36, 61, 62, 86, 87, 255])
        with patch("dummy_file_creator.services.random_text.secrets.token_bytes", return_value=raw):
            text = generate(len(raw), 0)

        # 255 % 87 == 81 -> punctuation index 19
        assert text == "09AZaz!?0" + PUNCTUATIONS[19]

    def test_top_up_only_replaces_alphanumerics(self) -> None:
        """Missing punctuation is added by overwriting alphanumeric positions."""
        raw = bytes([62] + [0] * 7)  # one "!" then seven "0"
        with patch("dummy_file_creator.services.random_text.secrets.token_bytes", return_value=raw):
            text = generate(8, 4)

        assert len(text) == 8
        assert text[0] == "!"
        assert count_non_alphanumeric(text) == 4
        assert text.count("0") == 4

    def test_extra_punctuation_is_kept(self) -> None:
        """A first pass above the minimum is returned unchanged."""
        raw = bytes([62, 63, 64, 65])
        with patch("dummy_file_creator.services.random_text.secrets.token_bytes", return_value=raw):
            text = generate(4, 1)

        assert text == PUNCTUATIONS[:4]

    @pytest.mark.parametrize("length", [0, -1, 129])
    def test_length_out_of_range_raises(self, length: int) -> None:
        with pytest.raises(GenerationParameterError) as exc_info:
            generate(length, 0)

        assert exc_info.value.parameter == "length"

    @pytest.mark.parametrize(("length", "minimum"), [(10, 11), (10, -1)])
    def test_minimum_out_of_range_raises(self, length: int, minimum: int) -> None:
        with pytest.raises(GenerationParameterError) as exc_info:
            generate(length, minimum)

        assert exc_info.value.parameter == "min_non_alphanumeric"

    def test_out_of_range_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            generate(MAX_LENGTH + 1, 0)
