# backend/summarization/extractor.py

"""LLM calls for summary generation and highlight extraction."""

import asyncio
from typing import Any, Optional

import httpx
import openai
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from logger import logger
from config import (
    LLM_MAX_RETRIES,
    LLM_RETRY_BASE_DELAY,
    LLM_CIRCUIT_THRESHOLD,
    LLM_CIRCUIT_COOLDOWN,
)
from circuit_breaker import CircuitBreaker
from exceptions import SummarizationError
from models import Highlights, SummaryOptions, SummaryResult
from utils.text_processing import count_words, compression_ratio
from .prompts import build_summary_prompt, build_highlight_prompt
from .highlights import parse_highlights

# Read at call time so tests and operators can tune them
MAX_RETRIES = LLM_MAX_RETRIES
RETRY_BASE_DELAY = LLM_RETRY_BASE_DELAY

# Only timeouts, dropped connections and rate limits are retried
TRANSIENT_ERRORS = (
    ConnectionError,
    TimeoutError,
    asyncio.TimeoutError,
    httpx.TransportError,
    openai.APIConnectionError,  # includes APITimeoutError
    openai.RateLimitError,
)

# Circuit breaker for failed summary generations
summary_circuit = CircuitBreaker(
    name="summary",
    threshold=LLM_CIRCUIT_THRESHOLD,
    cooldown_seconds=LLM_CIRCUIT_COOLDOWN,
)


def _response_text(response: Any) -> str:
    content = response.content if hasattr(response, "content") else response
    if isinstance(content, list):
        # Some chat models return content blocks
        parts = []
        for block in content:
            if isinstance(block, dict):
                parts.append(str(block.get("text", "")))
            else:
                parts.append(str(block))
        return "".join(parts)
    return str(content)


def _log_retry(label: str):
    def before_sleep(retry_state: RetryCallState) -> None:
        logger.warning(
            "%s call failed (attempt %s): %s; retrying in %.1fs",
            label,
            retry_state.attempt_number,
            retry_state.outcome.exception(),
            retry_state.next_action.sleep if retry_state.next_action else 0,
        )
    return before_sleep


async def invoke_with_retry(llm: Any, prompt: str, label: str) -> str:
    """
    Invoke the chat model, retrying transient failures with exponential backoff.

    Makes at most ``MAX_RETRIES + 1`` attempts. Errors outside
    ``TRANSIENT_ERRORS`` (bad credentials, rejected requests) are raised on
    the first attempt.
    """
    async for attempt in AsyncRetrying(
        stop=stop_after_attempt(MAX_RETRIES + 1),
        wait=wait_exponential(multiplier=RETRY_BASE_DELAY),
        retry=retry_if_exception_type(TRANSIENT_ERRORS),
        before_sleep=_log_retry(label),
        reraise=True,
    ):
        with attempt:
            response = await llm.ainvoke(prompt)
    return _response_text(response)


async def generate_summary(llm: Any, text: str, options: SummaryOptions) -> str:
    """
    Ask the model for a summary and return its text verbatim.

    Raises:
        CircuitBreakerOpenError: too many consecutive failures recently
        SummarizationError: the model call failed after retries
    """
    summary_circuit.check()

    prompt = build_summary_prompt(text, options.summary_type, options.custom_length, options.tone)
    try:
        summary = await invoke_with_retry(llm, prompt, label="summary")
    except Exception as exc:
        summary_circuit.record_failure()
        logger.error("Summary generation failed: %s", exc, exc_info=True)
        raise SummarizationError() from exc

    summary_circuit.record_success()
    return summary


async def extract_highlights(llm: Any, text: str) -> Highlights:
    """Keywords, names and dates from the text. Failures degrade to empty lists."""
    try:
        response_text = await invoke_with_retry(llm, build_highlight_prompt(text), label="highlights")
    except Exception as exc:
        logger.warning(f"Highlight extraction failed, continuing without highlights: {exc}")
        return Highlights()
    return parse_highlights(response_text)


async def summarize_document(llm: Any, text: str, options: Optional[SummaryOptions] = None) -> SummaryResult:
    """
    Summary and highlights for ``text``.

    The two model calls run concurrently. A failed summary fails the whole
    operation (the highlight call is cancelled); failed highlights only
    leave the highlight lists empty.
    """
    options = options or SummaryOptions()

    highlight_task = asyncio.create_task(extract_highlights(llm, text))
    try:
        summary = await generate_summary(llm, text, options)
    except Exception:
        highlight_task.cancel()
        await asyncio.gather(highlight_task, return_exceptions=True)
        raise
    highlights = await highlight_task

    original_words = count_words(text)
    summary_words = count_words(summary)
    result = SummaryResult(
        summary=summary,
        highlights=highlights,
        original_word_count=original_words,
        summary_word_count=summary_words,
        compression_ratio=compression_ratio(original_words, summary_words),
    )

    logger.info(
        "Summarized %s words -> %s words (type=%s, tone=%s, compression=%s%%, "
        "keywords=%s, names=%s, dates=%s)",
        original_words,
        summary_words,
        options.summary_type,
        options.tone,
        result.compression_ratio,
        len(highlights.keywords),
        len(highlights.names),
        len(highlights.dates),
    )
    return result
