"""Test doubles for the chat model and the Pinecone index."""

import io
import json
from typing import Any, Dict, List, Optional

from docx import Document

DEFAULT_HIGHLIGHTS = json.dumps({
    "keywords": ["renewable energy", "solar"],
    "names": ["Ada Lovelace", "Acme Corp"],
    "dates": ["2024-03-01"],
})

HIGHLIGHT_PROMPT_PREFIX = "From the following text, extract"


class FakeMessage:
    def __init__(self, content: str):
        self.content = content


class FakeChatModel:
    """
    Stands in for a LangChain chat model.

    Summary prompts and highlight prompts are told apart by their opening
    words. ``summary_failures`` makes the first N summary calls raise
    ``summary_error``, a dropped connection by default.
    """

    def __init__(
        self,
        summary: str = "Solar adoption grew quickly.",
        highlights: str = DEFAULT_HIGHLIGHTS,
        summary_failures: int = 0,
        summary_error: Optional[Exception] = None,
        highlight_error: Optional[Exception] = None,
    ):
        self.summary = summary
        self.highlights = highlights
        self.summary_failures = summary_failures
        self.summary_error = summary_error
        self.highlight_error = highlight_error
        self.summary_prompts: List[str] = []
        self.highlight_prompts: List[str] = []

    async def ainvoke(self, prompt: str) -> FakeMessage:
        if prompt.startswith(HIGHLIGHT_PROMPT_PREFIX):
            self.highlight_prompts.append(prompt)
            if self.highlight_error is not None:
                raise self.highlight_error
            return FakeMessage(self.highlights)

        self.summary_prompts.append(prompt)
        if self.summary_failures > 0:
            self.summary_failures -= 1
            raise self.summary_error or ConnectionError("model unavailable")
        return FakeMessage(self.summary)


class FakeIndex:
    """In-process imitation of the Pinecone index calls the history store makes."""

    def __init__(self):
        self.vectors: Dict[str, Dict[str, Dict[str, Any]]] = {}

    def upsert(self, vectors, namespace="default"):
        space = self.vectors.setdefault(namespace, {})
        for vector in vectors:
            space[vector["id"]] = vector
        return {"upserted_count": len(vectors)}

    def query(self, vector, top_k, include_metadata, namespace="default", filter=None):
        matches = []
        for item in self.vectors.get(namespace, {}).values():
            metadata = item["metadata"]
            if all(metadata.get(key) == value for key, value in (filter or {}).items()):
                matches.append({"id": item["id"], "score": 1.0, "metadata": metadata})
        return {"matches": matches[:top_k]}

    def fetch(self, ids, namespace="default"):
        space = self.vectors.get(namespace, {})
        return {"vectors": {i: space[i] for i in ids if i in space}}

    def delete(self, ids, namespace="default"):
        space = self.vectors.get(namespace, {})
        for i in ids:
            space.pop(i, None)


def make_docx(*paragraphs: str) -> bytes:
    doc = Document()
    for paragraph in paragraphs:
        doc.add_paragraph(paragraph)
    buffer = io.BytesIO()
    doc.save(buffer)
    return buffer.getvalue()
