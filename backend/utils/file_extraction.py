# backend/utils/file_extraction.py

import io
import mimetypes
from pathlib import PurePath
from typing import Optional

from docx import Document

from config import (
    ALLOWED_EXTENSIONS,
    ALLOWED_MIME_TYPES,
    DOCX_MIME_TYPE,
    MAX_FILE_SIZE,
    TEXT_MIME_TYPE,
)
from exceptions import DocumentValidationError, ExtractionError
from logger import logger
from models import ExtractedText
from .text_processing import cap_text, count_words

# User-facing rejection messages, one per cause
FILE_TOO_LARGE_MESSAGE = "File is too large. Maximum size is 10MB."
INVALID_TYPE_MESSAGE = "Invalid file type. Please upload DOCX or TXT files only."
UPLOAD_FAILED_MESSAGE = "File upload failed. Please try again."
NO_TEXT_MESSAGE = "No text could be extracted from the file"

# Server responses
SERVER_INVALID_TYPE_MESSAGE = "Invalid file type. Please upload DOCX or TXT files for server-side processing."
SERVER_TOO_LARGE_MESSAGE = "File too large"
NO_FILE_MESSAGE = "No file uploaded"

_GENERIC_MIME_TYPES = {"", "application/octet-stream"}


def resolve_media_type(declared: Optional[str], file_name: Optional[str]) -> Optional[str]:
    """
    The declared media type when it is one we accept.

    Clients that cannot tell (no type or ``application/octet-stream``) fall back
    to the file extension. A specific but unsupported declared type is returned
    as-is so validation rejects it.
    """
    declared = (declared or "").split(";")[0].strip().lower()
    if declared in ALLOWED_MIME_TYPES:
        return declared
    if declared in _GENERIC_MIME_TYPES:
        suffix = PurePath(file_name or "").suffix.lower()
        if suffix in ALLOWED_EXTENSIONS:
            return ALLOWED_EXTENSIONS[suffix]
        guessed, _ = mimetypes.guess_type(file_name or "")
        return guessed
    return declared


def classify_rejection(file_name: Optional[str], size: Optional[int], content_type: Optional[str] = None) -> Optional[str]:
    """
    Message explaining why a selected file cannot be accepted, or None.

    Mirrors a file picker that accepts ``.docx``/``.txt`` up to 10MB.
    """
    if file_name is None or size is None or size < 0:
        return UPLOAD_FAILED_MESSAGE
    suffix = PurePath(file_name).suffix.lower()
    media_type = resolve_media_type(content_type, file_name)
    if suffix not in ALLOWED_EXTENSIONS and media_type not in ALLOWED_MIME_TYPES:
        return INVALID_TYPE_MESSAGE
    if size > MAX_FILE_SIZE:
        return FILE_TOO_LARGE_MESSAGE
    return None


def decode_text_bytes(data: bytes) -> str:
    """Decode a plain-text upload as UTF-8; undecodable bytes become U+FFFD."""
    return data.decode("utf-8", errors="replace")


def extract_text_from_docx_bytes(docx_bytes: bytes) -> str:
    """
    Extract text from a DOCX file (given as raw bytes) and return the concatenated text.
    Uses python-docx to read all paragraphs, one per line.
    """
    doc = Document(io.BytesIO(docx_bytes))
    return "\n".join(paragraph.text for paragraph in doc.paragraphs)


def build_extracted_text(text: str, file_type: str, file_name: str, file_size: int) -> ExtractedText:
    """
    Apply the shared rules to raw extracted text: reject blank text, cap the
    length, count words on what is returned.
    """
    if not text or not text.strip():
        raise DocumentValidationError(NO_TEXT_MESSAGE)
    text = cap_text(text)
    return ExtractedText(
        text=text,
        word_count=count_words(text),
        file_type=file_type,
        file_name=file_name,
        file_size=file_size,
    )


def extract_plain_text(data: bytes, file_name: str) -> ExtractedText:
    """Local extraction path for ``text/plain`` files."""
    return build_extracted_text(decode_text_bytes(data), TEXT_MIME_TYPE, file_name, len(data))


def check_upload_size(size: int, file_name: str) -> None:
    """Raise DocumentValidationError when an uploaded file exceeds MAX_FILE_SIZE."""
    if size > MAX_FILE_SIZE:
        logger.warning("Rejected upload '%s' (bytes=%s > %s)", file_name, size, MAX_FILE_SIZE)
        raise DocumentValidationError(SERVER_TOO_LARGE_MESSAGE)


def extract_document(data: bytes, declared_type: Optional[str], file_name: Optional[str]) -> ExtractedText:
    """
    Server-side extraction: validate type and size, convert, then apply the shared rules.

    Raises:
        DocumentValidationError: unsupported type, oversized file, or no text
        ExtractionError: the conversion library failed
    """
    file_name = file_name or "document"
    media_type = resolve_media_type(declared_type, file_name)
    if media_type not in ALLOWED_MIME_TYPES:
        logger.warning("Rejected upload '%s' with media type %r", file_name, declared_type)
        raise DocumentValidationError(SERVER_INVALID_TYPE_MESSAGE)
    check_upload_size(len(data), file_name)

    try:
        if media_type == DOCX_MIME_TYPE:
            text = extract_text_from_docx_bytes(data)
        else:
            text = decode_text_bytes(data)
    except Exception as exc:
        logger.exception("Failed to extract text from file '%s'", file_name)
        raise ExtractionError() from exc

    return build_extracted_text(text, media_type, file_name, len(data))
