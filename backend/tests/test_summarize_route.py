"""Tests for POST /summarize and the history write that follows it."""

import config
from dependencies import get_history_store_provider

ORIGINAL = " ".join(["word"] * 1000)


def _summarize(client, headers=None, **overrides):
    payload = {"text": ORIGINAL, "summaryType": "short", "tone": "neutral"}
    payload.update(overrides)
    return client.post("/summarize", json=payload, headers=headers or {})


class TestSummarizeEndpoint:

    def test_success_shape(self, test_client, fake_llm):
        fake_llm.summary = " ".join(["short"] * 100)
        response = _summarize(test_client)
        assert response.status_code == 200
        body = response.json()
        assert body["summary"] == fake_llm.summary
        assert body["originalWordCount"] == 1000
        assert body["summaryWordCount"] == 100
        assert body["compressionRatio"] == 90
        assert set(body["highlights"]) == {"keywords", "names", "dates"}
        assert body["highlights"]["names"] == ["Ada Lovelace", "Acme Corp"]

    def test_defaults_when_options_missing(self, test_client, fake_llm):
        response = test_client.post("/summarize", json={"text": "A short note about solar."})
        assert response.status_code == 200
        assert fake_llm.summary_prompts[0].startswith("Please provide a concise summary")

    def test_blank_text_rejected(self, test_client, fake_llm):
        for payload in ({"text": ""}, {"text": "   \n"}, {}):
            response = test_client.post("/summarize", json=payload)
            assert response.status_code == 400
            assert response.json() == {"error": "No text provided for summarization"}
        assert fake_llm.summary_prompts == []

    def test_missing_credentials(self, history_store, monkeypatch):
        from fastapi.testclient import TestClient
        from main import app

        monkeypatch.setattr(config, "OPENAI_API_KEY", None)
        monkeypatch.setattr(config, "NVIDIA_API_KEY", "  ")
        app.dependency_overrides[get_history_store_provider] = lambda: (lambda: history_store)

        response = _summarize(TestClient(app))
        assert response.status_code == 500
        assert response.json() == {"error": "AI API key not configured"}

    def test_blank_text_checked_before_credentials(self, monkeypatch):
        from fastapi.testclient import TestClient
        from main import app

        monkeypatch.setattr(config, "OPENAI_API_KEY", None)
        monkeypatch.setattr(config, "NVIDIA_API_KEY", None)

        response = TestClient(app).post("/summarize", json={"text": " "})
        assert response.status_code == 400

    def test_invalid_tone(self, test_client):
        response = _summarize(test_client, tone="sarcastic")
        assert response.status_code == 400
        assert response.json()["error"].startswith("tone")

    def test_custom_length_out_of_range(self, test_client):
        for length in (10, 1001):
            response = _summarize(test_client, summaryType="custom", customLength=length)
            assert response.status_code == 400
            assert "customLength must be between 50 and 1000" in response.json()["error"]

    def test_custom_length_ignored_for_other_types(self, test_client, fake_llm):
        response = _summarize(test_client, summaryType="short", customLength=5)
        assert response.status_code == 200
        assert "approximately" not in fake_llm.summary_prompts[0]

    def test_null_tone_is_neutral(self, test_client, fake_llm):
        response = _summarize(test_client, tone=None)
        assert response.status_code == 200
        assert fake_llm.summary_prompts[0].startswith("Please provide a concise summary")

    def test_custom_length_reaches_prompt(self, test_client, fake_llm):
        response = _summarize(test_client, summaryType="custom", customLength=350)
        assert response.status_code == 200
        assert "approximately 350 words" in fake_llm.summary_prompts[0]

    def test_unstructured_highlights_still_succeed(self, test_client, fake_llm):
        fake_llm.highlights = "I could not find anything notable."
        response = _summarize(test_client)
        assert response.status_code == 200
        assert response.json()["highlights"] == {"keywords": [], "names": [], "dates": []}

    def test_model_failure_is_generic_500(self, test_client, fake_llm):
        fake_llm.summary_failures = 100
        response = _summarize(test_client)
        assert response.status_code == 500
        error = response.json()["error"]
        assert error == "Failed to generate summary. Please check your API key and try again."
        assert "model unavailable" not in error


class TestHistoryPersistence:

    def test_signed_in_summary_is_saved(self, test_client, history_store):
        response = _summarize(
            test_client,
            headers={"X-User-Id": "user-1"},
            summaryType="custom",
            customLength=300,
            tone="academic",
            fileName="report.docx",
            fileSize=2048,
            fileType=config.DOCX_MIME_TYPE,
        )
        assert response.status_code == 200

        records = history_store.list_for_user("user-1")
        assert len(records) == 1
        record = records[0]
        assert record.file_name == "report.docx"
        assert record.file_size == 2048
        assert record.summary_type == "custom"
        assert record.custom_length == 300
        assert record.tone == "academic"
        assert record.original_text == ORIGINAL[:1000]
        assert record.summary == response.json()["summary"]
        assert record.compression_ratio == response.json()["compressionRatio"]

    def test_custom_length_dropped_for_other_types(self, test_client, history_store):
        _summarize(test_client, headers={"X-User-Id": "user-1"}, summaryType="bullet", customLength=300)
        assert history_store.list_for_user("user-1")[0].custom_length is None

    def test_anonymous_summary_not_saved(self, test_client, history_store):
        response = _summarize(test_client)
        assert response.status_code == 200
        assert history_store.list_for_user("") == []
        assert history_store._records == {}

    def test_failed_summary_not_saved(self, test_client, fake_llm, history_store):
        fake_llm.summary_failures = 100
        _summarize(test_client, headers={"X-User-Id": "user-1"})
        assert history_store.list_for_user("user-1") == []

    def test_store_failure_does_not_affect_response(self, test_client, history_store, monkeypatch):
        def broken_add(record):
            raise ConnectionError("index unreachable")

        monkeypatch.setattr(history_store, "add", broken_add)
        response = _summarize(test_client, headers={"X-User-Id": "user-1"})
        assert response.status_code == 200
        assert response.json()["summary"]
