# backend/models.py

"""Pydantic models for the API. Field names are camelCase on the wire."""

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from config import (
    DEFAULT_SUMMARY_TYPE,
    DEFAULT_TONE,
    MIN_CUSTOM_LENGTH,
    MAX_CUSTOM_LENGTH,
)

Tone = Literal["neutral", "professional", "casual", "academic"]


class ApiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ExtractedText(ApiModel):
    """Plain text pulled out of an uploaded document."""
    text: str
    word_count: int
    file_type: str
    file_name: str
    file_size: int


class SummaryOptions(ApiModel):
    # "short", "bullet" or "custom"; anything else gets the comprehensive prompt
    summary_type: str = DEFAULT_SUMMARY_TYPE
    # Only meaningful (and only range-checked) for custom summaries
    custom_length: Optional[int] = None
    tone: Tone = DEFAULT_TONE

    @field_validator("tone", mode="before")
    @classmethod
    def _missing_tone_is_neutral(cls, value):
        return DEFAULT_TONE if value is None else value

    @model_validator(mode="after")
    def _check_custom_length(self):
        if self.summary_type == "custom" and self.custom_length is not None:
            if not MIN_CUSTOM_LENGTH <= self.custom_length <= MAX_CUSTOM_LENGTH:
                raise ValueError(
                    f"customLength must be between {MIN_CUSTOM_LENGTH} and {MAX_CUSTOM_LENGTH}"
                )
        return self


class SummarizeRequest(SummaryOptions):
    text: Optional[str] = None
    # Source file metadata, recorded in history when present
    file_name: Optional[str] = None
    file_size: Optional[int] = None
    file_type: Optional[str] = None


class Highlights(ApiModel):
    keywords: List[str] = Field(default_factory=list)
    names: List[str] = Field(default_factory=list)
    dates: List[str] = Field(default_factory=list)


class SummaryResult(ApiModel):
    summary: str
    highlights: Highlights = Field(default_factory=Highlights)
    original_word_count: int
    summary_word_count: int
    compression_ratio: int


class HistoryRecord(ApiModel):
    """One persisted summarization. Immutable once written."""
    model_config = ConfigDict(frozen=True)

    id: str
    user_id: str
    file_name: str
    file_size: int = 0
    file_type: str = ""
    original_text: str
    summary: str
    summary_type: str
    tone: str
    custom_length: Optional[int] = None
    original_word_count: int
    summary_word_count: int
    compression_ratio: int
    highlights: Highlights = Field(default_factory=Highlights)
    created_at: datetime


class HistoryStats(ApiModel):
    documents_processed: int
    time_saved: int  # minutes


class DeleteResponse(ApiModel):
    id: str
    deleted: bool = True
