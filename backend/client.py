# backend/client.py

"""HTTP client for the DocSumm API."""

from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import unquote

import httpx

from exceptions import SummarizerApiError
from models import (
    ExtractedText,
    HistoryRecord,
    HistoryStats,
    SummaryOptions,
    SummaryResult,
)

DEFAULT_BASE_URL = "http://localhost:8000"


class SummarizerClient:
    """
    Thin wrapper over the HTTP API.

    ``user_id`` is sent as ``X-User-Id`` on every request; without it
    summaries are not saved and history calls fail with 401.

    Any ``httpx.Client`` can be supplied (FastAPI's ``TestClient`` included);
    otherwise one is created for ``base_url``.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        user_id: Optional[str] = None,
        http_client: Optional[httpx.Client] = None,
        timeout: float = 120.0,
    ):
        self.user_id = user_id
        self._owns_client = http_client is None
        self._http = http_client or httpx.Client(base_url=base_url, timeout=timeout)

    def close(self) -> None:
        if self._owns_client:
            self._http.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def _headers(self) -> Dict[str, str]:
        return {"X-User-Id": self.user_id} if self.user_id else {}

    def _request(self, method: str, path: str, default_error: str, **kwargs: Any) -> httpx.Response:
        try:
            response = self._http.request(method, path, headers=self._headers(), **kwargs)
        except httpx.HTTPError as exc:
            raise SummarizerApiError(default_error) from exc

        if response.is_error:
            try:
                message = response.json().get("error") or default_error
            except ValueError:
                message = default_error
            raise SummarizerApiError(message, status_code=response.status_code)
        return response

    def upload(
        self,
        file_name: str,
        data: bytes,
        content_type: Optional[str] = None,
        extracted_text: Optional[str] = None,
    ) -> ExtractedText:
        files = {"file": (file_name, data, content_type or "application/octet-stream")}
        form = {"extractedText": extracted_text} if extracted_text else None
        response = self._request("POST", "/upload", "Failed to process file", files=files, data=form)
        return ExtractedText.model_validate(response.json())

    def summarize(
        self,
        text: str,
        options: Optional[SummaryOptions] = None,
        file_name: Optional[str] = None,
        file_size: Optional[int] = None,
        file_type: Optional[str] = None,
    ) -> SummaryResult:
        options = options or SummaryOptions()
        payload = {
            "text": text,
            "summaryType": options.summary_type,
            "tone": options.tone,
            "fileName": file_name,
            "fileSize": file_size,
            "fileType": file_type,
        }
        if options.summary_type == "custom" and options.custom_length is not None:
            payload["customLength"] = options.custom_length
        response = self._request("POST", "/summarize", "Failed to generate summary", json=payload)
        return SummaryResult.model_validate(response.json())

    def list_history(self) -> List[HistoryRecord]:
        response = self._request("GET", "/history", "Failed to load history")
        return [HistoryRecord.model_validate(item) for item in response.json()]

    def get_history(self, record_id: str) -> HistoryRecord:
        response = self._request("GET", f"/history/{record_id}", "Failed to load summary")
        return HistoryRecord.model_validate(response.json())

    def history_stats(self) -> HistoryStats:
        response = self._request("GET", "/history/stats", "Failed to load statistics")
        return HistoryStats.model_validate(response.json())

    def download_summary(self, record_id: str) -> Tuple[str, str]:
        """``(filename, summary text)`` for a saved summary."""
        response = self._request("GET", f"/history/{record_id}/download", "Failed to download summary")
        _, _, encoded = response.headers.get("content-disposition", "").partition("''")
        return unquote(encoded) or "summary.txt", response.text

    def delete_history(self, record_id: str) -> None:
        self._request("DELETE", f"/history/{record_id}", "Failed to delete summary")
