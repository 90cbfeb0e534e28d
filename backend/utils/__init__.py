# backend/utils/__init__.py

"""Shared utilities: file extraction and text processing."""

from .file_extraction import (
    classify_rejection,
    extract_document,
    extract_plain_text,
    extract_text_from_docx_bytes,
    build_extracted_text,
    check_upload_size,
    resolve_media_type,
)
from .text_processing import (
    cap_text,
    count_words,
    compression_ratio,
    estimate_reading_minutes,
    format_file_size,
    summary_download_name,
)

__all__ = [
    "classify_rejection",
    "extract_document",
    "extract_plain_text",
    "extract_text_from_docx_bytes",
    "build_extracted_text",
    "check_upload_size",
    "resolve_media_type",
    "cap_text",
    "count_words",
    "compression_ratio",
    "estimate_reading_minutes",
    "format_file_size",
    "summary_download_name",
]
