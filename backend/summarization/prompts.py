# backend/summarization/prompts.py

"""Prompt templates for summary generation and highlight extraction."""

from typing import Optional

from config import DEFAULT_CUSTOM_LENGTH

TONE_INSTRUCTIONS = {
    "professional": "Use a professional and formal tone.",
    "casual": "Use a casual and conversational tone.",
    "academic": "Use an academic and scholarly tone with precise language.",
}


def build_summary_prompt(
    text: str,
    summary_type: Optional[str],
    custom_length: Optional[int] = None,
    tone: Optional[str] = None,
) -> str:
    """
    Build the summary prompt for the selected options.

    Length and format targets are requests to the model; nothing downstream
    enforces them.
    """
    if summary_type == "short":
        prompt = (
            "Please provide a concise summary of the following text in 1-2 paragraphs. "
            f"Focus on the main points and key information:\n\n{text}"
        )
    elif summary_type == "bullet":
        prompt = (
            "Please summarize the following text as bullet points. "
            f"Extract the key information and present it in a clear, organized list:\n\n{text}"
        )
    elif summary_type == "custom":
        word_count = custom_length or DEFAULT_CUSTOM_LENGTH
        prompt = (
            f"Please summarize the following text in approximately {word_count} words. "
            f"Maintain the essential information while being concise:\n\n{text}"
        )
    else:
        prompt = (
            "Please provide a comprehensive summary of the following text, "
            f"highlighting the main points and key information:\n\n{text}"
        )

    instruction = TONE_INSTRUCTIONS.get(tone or "neutral")
    if instruction:
        prompt = f"{instruction} {prompt}"

    return prompt


def build_highlight_prompt(text: str) -> str:
    return (
        "From the following text, extract important keywords, names of people/organizations, and dates. "
        'Present them as a JSON object with three arrays: "keywords", "names", and "dates":'
        f"\n\n{text}"
    )
