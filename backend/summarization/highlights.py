# backend/summarization/highlights.py

"""Best-effort parsing of the highlight JSON returned by the model."""

import json
from typing import Any, List

from logger import logger
from models import Highlights
from patterns import JSON_OBJECT_PATTERN


def _string_list(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [str(item) for item in value if item is not None and not isinstance(item, (dict, list))]


def parse_highlights(response_text: str) -> Highlights:
    """
    Parse ``{"keywords": [...], "names": [...], "dates": [...]}`` out of a model response.

    The response may wrap the object in prose or markdown fences, so the span from
    the first "{" to the last "}" is parsed. Anything unusable yields empty lists;
    this never raises.
    """
    json_match = JSON_OBJECT_PATTERN.search(response_text or "")
    if not json_match:
        logger.warning("No JSON object found in highlight response")
        return Highlights()

    try:
        data = json.loads(json_match.group())
    except json.JSONDecodeError as e:
        logger.warning(f"Could not parse highlights: {e}")
        logger.debug(f"Highlight response text: {response_text[:500]}")
        return Highlights()

    if not isinstance(data, dict):
        logger.warning("Highlight JSON is not an object (got %s)", type(data).__name__)
        return Highlights()

    return Highlights(
        keywords=_string_list(data.get("keywords")),
        names=_string_list(data.get("names")),
        dates=_string_list(data.get("dates")),
    )
