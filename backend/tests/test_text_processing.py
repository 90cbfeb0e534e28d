"""Tests for word counting, compression ratio and formatting helpers."""

import pytest

from utils import (
    cap_text,
    compression_ratio,
    count_words,
    estimate_reading_minutes,
    format_file_size,
    summary_download_name,
)


class TestCountWords:

    def test_discards_empty_tokens(self):
        assert count_words("  leading and   trailing  ") == 3

    def test_mixed_whitespace(self):
        assert count_words("one\ttwo\nthree\r\nfour") == 4

    def test_empty(self):
        assert count_words("") == 0
        assert count_words("   \n") == 0


class TestCompressionRatio:

    def test_thousand_to_hundred_is_ninety(self):
        assert compression_ratio(1000, 100) == 90

    def test_longer_summary_is_negative(self):
        assert compression_ratio(100, 150) == -50

    def test_rounds_half_up(self):
        # 1 - 7/8 = 12.5%
        assert compression_ratio(8, 7) == 13

    def test_zero_original(self):
        assert compression_ratio(0, 10) == 0


class TestHelpers:

    def test_cap_text_short_unchanged(self):
        assert cap_text("abc", max_length=5) == "abc"

    def test_cap_text_long(self):
        assert cap_text("abcdefgh", max_length=5) == "abcde..."

    @pytest.mark.parametrize("words, minutes", [(0, 0), (1, 1), (100, 1), (101, 2), (1000, 10)])
    def test_reading_minutes_round_up(self, words, minutes):
        assert estimate_reading_minutes(words) == minutes

    @pytest.mark.parametrize("size, expected", [
        (0, "0 Bytes"),
        (512, "512 Bytes"),
        (1536, "1.5 KB"),
        (10 * 1024 * 1024, "10 MB"),
    ])
    def test_format_file_size(self, size, expected):
        assert format_file_size(size) == expected

    def test_download_name(self):
        assert summary_download_name("report.docx") == "report.docx_summary.txt"
        assert summary_download_name("a/b:c.txt") == "a_b_c.txt_summary.txt"
        assert summary_download_name("") == "document_summary.txt"
