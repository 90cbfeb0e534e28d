# backend/config.py

import os
from dotenv import load_dotenv

load_dotenv(override=True)

DEBUG = os.getenv("DEBUG", "false").lower() == "true"

_cors_origins_raw = os.getenv("CORS_ORIGINS")
if _cors_origins_raw:
    CORS_ORIGINS = [origin.strip() for origin in _cors_origins_raw.split(",") if origin.strip()]
else:
    CORS_ORIGINS = ["*"]

# Ensure local dev servers can hit the API even when custom origins are provided
_LOCAL_DEV_ORIGINS = {
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://localhost:3000",
    "http://127.0.0.1:3000",
}
if "*" not in CORS_ORIGINS:
    for origin in _LOCAL_DEV_ORIGINS:
        if origin not in CORS_ORIGINS:
            CORS_ORIGINS.append(origin)

# Generative model credentials. OpenAI wins when both are set.
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")
NVIDIA_API_KEY = os.getenv("NVIDIA_API_KEY")
OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4o-mini")
NVIDIA_MODEL = os.getenv("NVIDIA_MODEL", "meta/llama-4-maverick-17b-128e-instruct")
LLM_TEMPERATURE = float(os.getenv("LLM_TEMPERATURE", "0.3"))

# Upstream retry / circuit breaker
LLM_MAX_RETRIES = int(os.getenv("LLM_MAX_RETRIES", "2"))
LLM_RETRY_BASE_DELAY = float(os.getenv("LLM_RETRY_BASE_DELAY", "1.0"))  # seconds, doubled per attempt
LLM_CIRCUIT_THRESHOLD = int(os.getenv("LLM_CIRCUIT_THRESHOLD", "5"))
LLM_CIRCUIT_COOLDOWN = float(os.getenv("LLM_CIRCUIT_COOLDOWN", "60"))  # seconds

# History persistence: "pinecone" (hosted) or "memory" (local dev only)
HISTORY_BACKEND = os.getenv("HISTORY_BACKEND", "pinecone").lower()
PINECONE_API_KEY = os.getenv("PINECONE_API_KEY")
PINECONE_INDEX_NAME = os.getenv("PINECONE_INDEX_NAME") or "docsumm-history"
PINECONE_NAMESPACE = os.getenv("PINECONE_NAMESPACE", "summaries")
PINECONE_CLOUD = os.getenv("PINECONE_CLOUD", "aws")
PINECONE_REGION = os.getenv("PINECONE_REGION", "us-east-1")
# History records carry no embedding; the index only needs a small fixed dimension.
HISTORY_VECTOR_DIMENSION = int(os.getenv("HISTORY_VECTOR_DIMENSION", "8"))
HISTORY_QUERY_LIMIT = int(os.getenv("HISTORY_QUERY_LIMIT", "1000"))

# Upload limits
MAX_FILE_SIZE = int(os.getenv("MAX_FILE_SIZE", str(10 * 1024 * 1024)))  # 10MB
DOCX_MIME_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
TEXT_MIME_TYPE = "text/plain"
ALLOWED_MIME_TYPES = [DOCX_MIME_TYPE, TEXT_MIME_TYPE]
ALLOWED_EXTENSIONS = {".docx": DOCX_MIME_TYPE, ".txt": TEXT_MIME_TYPE}

# Text limits (identical for client-side and server-side extraction)
MAX_TEXT_LENGTH = 100_000
TRUNCATION_MARKER = "..."
ORIGINAL_TEXT_PREVIEW_CHARS = 1000

# Summary options
DEFAULT_SUMMARY_TYPE = "short"
DEFAULT_TONE = "neutral"
DEFAULT_CUSTOM_LENGTH = 200
MIN_CUSTOM_LENGTH = 50
MAX_CUSTOM_LENGTH = 1000

# Dashboard estimate: one minute of reading per this many words
READING_WORDS_PER_MINUTE = 100
