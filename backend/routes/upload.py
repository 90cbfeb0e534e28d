# backend/routes/upload.py

from typing import Optional

from fastapi import APIRouter, File, Form, UploadFile

from config import TEXT_MIME_TYPE
from exceptions import DocumentValidationError
from logger import logger
from models import ExtractedText
from utils import build_extracted_text, check_upload_size, extract_document
from utils.file_extraction import NO_FILE_MESSAGE

router = APIRouter()

# Metadata reported for pre-extracted text when no file part accompanies it
PLACEHOLDER_FILE_NAME = "document.txt"


@router.post("", response_model=ExtractedText)
async def upload_document(
    file: Optional[UploadFile] = File(default=None),
    extracted_text: Optional[str] = Form(default=None, alias="extractedText"),
):
    """Extract plain text from an uploaded DOCX or TXT file."""

    # Text already extracted client-side: only recount and cap it
    if extracted_text and extracted_text.strip():
        if file is not None:
            file_name = file.filename or PLACEHOLDER_FILE_NAME
            file_type = file.content_type or TEXT_MIME_TYPE
            file_size = file.size if file.size is not None else len(await file.read())
            check_upload_size(file_size, file_name)
        else:
            file_name, file_type, file_size = PLACEHOLDER_FILE_NAME, TEXT_MIME_TYPE, 0

        logger.info("Using pre-extracted text for '%s' (chars=%s)", file_name, len(extracted_text))
        return build_extracted_text(extracted_text, file_type, file_name, file_size)

    if file is None:
        raise DocumentValidationError(NO_FILE_MESSAGE)

    data = await file.read()
    logger.info(
        "Upload received '%s' (bytes=%s, content_type=%s)",
        file.filename,
        len(data),
        file.content_type,
    )

    extracted = extract_document(data, file.content_type, file.filename)

    logger.info(
        "Extracted %s words from '%s' (chars=%s)",
        extracted.word_count,
        extracted.file_name,
        len(extracted.text),
    )
    return extracted
