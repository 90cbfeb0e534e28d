# backend/summarization/__init__.py

"""Summarization: prompt building, model calls and highlight parsing."""

from .prompts import (
    TONE_INSTRUCTIONS,
    build_summary_prompt,
    build_highlight_prompt,
)
from .highlights import parse_highlights
from .extractor import (
    generate_summary,
    extract_highlights,
    summarize_document,
    summary_circuit,
)

__all__ = [
    "TONE_INSTRUCTIONS",
    "build_summary_prompt",
    "build_highlight_prompt",
    "parse_highlights",
    "generate_summary",
    "extract_highlights",
    "summarize_document",
    "summary_circuit",
]
