# backend/routes/summarize.py

from typing import Callable, Optional

from fastapi import APIRouter, BackgroundTasks, Depends

from dependencies import (
    UserContext,
    get_user_context,
    get_llm_provider,
    get_history_store_provider,
)
from exceptions import DocumentValidationError
from history import build_history_record, save_history_record
from logger import logger
from models import SummarizeRequest, SummaryResult
from summarization import summarize_document

router = APIRouter()

NO_TEXT_MESSAGE = "No text provided for summarization"


@router.post("", response_model=SummaryResult)
async def summarize(
    request: SummarizeRequest,
    background_tasks: BackgroundTasks,
    user: Optional[UserContext] = Depends(get_user_context),
    llm_provider: Callable = Depends(get_llm_provider),
    store_provider: Callable = Depends(get_history_store_provider),
):
    """
    Summarize extracted text and pull out highlights.

    Signed-in users get the result appended to their history after the
    response is sent.
    """
    if not request.text or not request.text.strip():
        raise DocumentValidationError(NO_TEXT_MESSAGE)

    llm = llm_provider()

    logger.info(
        "Summarize request (chars=%s, type=%s, tone=%s, custom_length=%s, user=%s)",
        len(request.text),
        request.summary_type,
        request.tone,
        request.custom_length,
        user.user_id if user else None,
    )

    result = await summarize_document(llm, request.text, request)

    if user is not None:
        record = build_history_record(user.user_id, request, result)
        background_tasks.add_task(save_history_record, store_provider, record)

    return result
