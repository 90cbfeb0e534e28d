# backend/utils/text_processing.py

"""Word counting, truncation and small formatting helpers shared by client and server."""

import math

from config import (
    MAX_TEXT_LENGTH,
    TRUNCATION_MARKER,
    READING_WORDS_PER_MINUTE,
)
from patterns import UNSAFE_FILENAME_PATTERN


def count_words(text: str) -> int:
    """
    Number of whitespace-delimited tokens, empty tokens discarded.

    Used for extraction and summarization counts alike, so the same text
    always yields the same count.
    """
    if not text:
        return 0
    return len(text.split())


def cap_text(text: str, max_length: int = MAX_TEXT_LENGTH) -> str:
    """Keep the first ``max_length`` characters and append the truncation marker beyond that."""
    if len(text) > max_length:
        return text[:max_length] + TRUNCATION_MARKER
    return text


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def compression_ratio(original_words: int, summary_words: int) -> int:
    """
    Percentage reduction in word count, rounded half-up.

    Negative when the summary is longer than the original.
    """
    if original_words <= 0:
        return 0
    return round_half_up((1 - summary_words / original_words) * 100)


def estimate_reading_minutes(word_count: int) -> int:
    return math.ceil(max(word_count, 0) / READING_WORDS_PER_MINUTE)


def format_file_size(num_bytes: int) -> str:
    """Human readable size, e.g. ``0 Bytes``, ``1.5 KB``, ``10 MB``."""
    if num_bytes <= 0:
        return "0 Bytes"
    units = ["Bytes", "KB", "MB", "GB"]
    value = float(num_bytes)
    unit = 0
    while value >= 1024 and unit < len(units) - 1:
        value /= 1024
        unit += 1
    return f"{round(value, 2):g} {units[unit]}"


def summary_download_name(file_name: str) -> str:
    safe = UNSAFE_FILENAME_PATTERN.sub("_", file_name or "").strip() or "document"
    return f"{safe}_summary.txt"
