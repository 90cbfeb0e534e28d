# backend/routes/history.py

import asyncio
from typing import List
from urllib.parse import quote

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from dependencies import UserContext, require_user, get_store
from exceptions import HistoryNotFoundError
from history import HistoryStore, compute_stats
from logger import logger
from models import DeleteResponse, HistoryRecord, HistoryStats
from utils import summary_download_name

router = APIRouter()


async def _get_owned_record(store: HistoryStore, record_id: str, user: UserContext) -> HistoryRecord:
    record = await asyncio.to_thread(store.get, record_id, user.user_id)
    if record is None:
        raise HistoryNotFoundError()
    return record


@router.get("", response_model=List[HistoryRecord])
async def list_history(
    user: UserContext = Depends(require_user),
    store: HistoryStore = Depends(get_store),
):
    """The user's summaries, newest first."""
    return await asyncio.to_thread(store.list_for_user, user.user_id)


@router.get("/stats", response_model=HistoryStats)
async def history_stats(
    user: UserContext = Depends(require_user),
    store: HistoryStore = Depends(get_store),
):
    records = await asyncio.to_thread(store.list_for_user, user.user_id)
    return compute_stats(records)


@router.get("/{record_id}", response_model=HistoryRecord)
async def get_history_record(
    record_id: str,
    user: UserContext = Depends(require_user),
    store: HistoryStore = Depends(get_store),
):
    return await _get_owned_record(store, record_id, user)


@router.get("/{record_id}/download", response_class=PlainTextResponse)
async def download_summary(
    record_id: str,
    user: UserContext = Depends(require_user),
    store: HistoryStore = Depends(get_store),
):
    """The summary as a ``<fileName>_summary.txt`` attachment."""
    record = await _get_owned_record(store, record_id, user)
    filename = summary_download_name(record.file_name)
    return PlainTextResponse(
        record.summary,
        headers={"Content-Disposition": f"attachment; filename*=UTF-8''{quote(filename)}"},
    )


@router.delete("/{record_id}", response_model=DeleteResponse)
async def delete_history_record(
    record_id: str,
    user: UserContext = Depends(require_user),
    store: HistoryStore = Depends(get_store),
):
    deleted = await asyncio.to_thread(store.delete, record_id, user.user_id)
    if not deleted:
        raise HistoryNotFoundError()
    logger.info("User %s deleted history record %s", user.user_id, record_id)
    return DeleteResponse(id=record_id)
