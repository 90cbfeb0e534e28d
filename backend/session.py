# backend/session.py

"""Per-user state behind the upload, summary and history views."""

from dataclasses import dataclass
from typing import List, Optional

from client import SummarizerClient
from config import TEXT_MIME_TYPE
from exceptions import DocumentValidationError, SummarizerApiError
from history import filter_history
from logger import logger
from models import ExtractedText, HistoryRecord, HistoryStats, SummaryOptions, SummaryResult
from utils import classify_rejection, extract_plain_text, format_file_size, resolve_media_type


@dataclass
class SelectedFile:
    name: str
    data: bytes
    content_type: str

    @property
    def size(self) -> int:
        return len(self.data)

    @property
    def display_size(self) -> str:
        return format_file_size(self.size)


class SummarizerSession:
    """
    Holds what the UI shows: the current file, its extracted text, the last
    summary, the cached history list and the record open in the detail pane.

    Errors meant for the user end up in ``error``; methods return None/False
    instead of raising.
    """

    def __init__(self, client: SummarizerClient):
        self.client = client
        self.current_file: Optional[SelectedFile] = None
        self.extracted: Optional[ExtractedText] = None
        self.summary: Optional[SummaryResult] = None
        self.history: List[HistoryRecord] = []
        self.selected: Optional[HistoryRecord] = None
        self.error = ""

    # Upload

    def select_file(self, name: str, data: bytes, content_type: Optional[str] = None) -> Optional[ExtractedText]:
        """
        Accept a newly picked file and extract its text.

        Plain text is extracted locally; DOCX goes to ``POST /upload``.
        Replaces any earlier extracted text and clears the previous summary.
        """
        self.error = ""

        rejection = classify_rejection(name, len(data) if data is not None else None, content_type)
        if rejection:
            self.error = rejection
            return None

        media_type = resolve_media_type(content_type, name) or ""
        self.current_file = SelectedFile(name=name, data=data, content_type=media_type)
        self.extracted = None
        self.summary = None

        try:
            self.extracted = self._extract(self.current_file)
        except (DocumentValidationError, SummarizerApiError) as exc:
            self.error = exc.message
            return None
        return self.extracted

    def _extract(self, file: SelectedFile) -> ExtractedText:
        if file.content_type == TEXT_MIME_TYPE:
            try:
                return extract_plain_text(file.data, file.name)
            except DocumentValidationError:
                raise
            except Exception as exc:
                logger.warning("Client-side extraction failed for '%s', trying server-side: %s", file.name, exc)
        return self.client.upload(file.name, file.data, file.content_type)

    # Summary

    def generate_summary(self, options: Optional[SummaryOptions] = None) -> Optional[SummaryResult]:
        """Summarize the current extracted text. The server records it in history."""
        if self.extracted is None:
            return None

        self.error = ""
        file = self.current_file
        try:
            self.summary = self.client.summarize(
                self.extracted.text,
                options,
                file_name=file.name if file else self.extracted.file_name,
                file_size=file.size if file else self.extracted.file_size,
                file_type=file.content_type if file else self.extracted.file_type,
            )
        except SummarizerApiError as exc:
            self.error = exc.message
            return None
        return self.summary

    # History

    def load_history(self) -> List[HistoryRecord]:
        try:
            self.history = self.client.list_history()
        except SummarizerApiError as exc:
            logger.error("Error fetching history: %s", exc.message)
            self.error = exc.message
        return self.history

    def select_record(self, record_id: str) -> Optional[HistoryRecord]:
        self.selected = next((r for r in self.history if r.id == record_id), None)
        return self.selected

    def delete_record(self, record_id: str) -> bool:
        """
        Delete from the store, then drop it from the cached list and close
        the detail pane if it was showing this record.
        """
        try:
            self.client.delete_history(record_id)
        except SummarizerApiError as exc:
            logger.error("Error deleting item %s: %s", record_id, exc.message)
            return False

        self.history = [r for r in self.history if r.id != record_id]
        if self.selected is not None and self.selected.id == record_id:
            self.selected = None
        return True

    def search(self, query: str) -> List[HistoryRecord]:
        return filter_history(self.history, query)

    def stats(self) -> Optional[HistoryStats]:
        try:
            return self.client.history_stats()
        except SummarizerApiError as exc:
            logger.error("Error fetching stats: %s", exc.message)
            return None
