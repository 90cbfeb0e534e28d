# backend/history/records.py

"""Building, saving and querying history records."""

import uuid
from datetime import datetime, timezone
from typing import Callable, Iterable, List, Optional

from config import ORIGINAL_TEXT_PREVIEW_CHARS
from logger import logger
from models import HistoryRecord, HistoryStats, SummarizeRequest, SummaryResult
from utils.text_processing import estimate_reading_minutes
from .storage import HistoryStore


def build_history_record(user_id: str, request: SummarizeRequest, result: SummaryResult) -> HistoryRecord:
    """
    Snapshot of a finished summarization.

    Only the first ``ORIGINAL_TEXT_PREVIEW_CHARS`` characters of the source
    text are kept. ``customLength`` is recorded only for custom summaries.
    """
    text = request.text or ""
    return HistoryRecord(
        id=uuid.uuid4().hex,
        user_id=user_id,
        file_name=request.file_name or "document",
        file_size=request.file_size or 0,
        file_type=request.file_type or "",
        original_text=text[:ORIGINAL_TEXT_PREVIEW_CHARS],
        summary=result.summary,
        summary_type=request.summary_type,
        tone=request.tone,
        custom_length=request.custom_length if request.summary_type == "custom" else None,
        original_word_count=result.original_word_count,
        summary_word_count=result.summary_word_count,
        compression_ratio=result.compression_ratio,
        highlights=result.highlights,
        created_at=datetime.now(timezone.utc),
    )


def save_history_record(store_provider: Callable[[], HistoryStore], record: HistoryRecord) -> None:
    """
    Best-effort write, run after the response has been sent.

    A failure is logged and dropped; the summary the user already received
    stays valid.
    """
    try:
        store_provider().add(record)
    except Exception:
        logger.exception(f"Failed to save history record {record.id} for user {record.user_id}")


def filter_history(records: Iterable[HistoryRecord], query: Optional[str]) -> List[HistoryRecord]:
    """Case-insensitive substring match on file name or summary text."""
    records = list(records)
    needle = (query or "").strip().lower()
    if not needle:
        return records
    return [
        r for r in records
        if needle in r.file_name.lower() or needle in r.summary.lower()
    ]


def compute_stats(records: Iterable[HistoryRecord]) -> HistoryStats:
    """Documents processed and estimated reading minutes saved (rounded up per record)."""
    documents = 0
    minutes = 0
    for record in records:
        documents += 1
        minutes += estimate_reading_minutes(record.original_word_count)
    return HistoryStats(documents_processed=documents, time_saved=minutes)
