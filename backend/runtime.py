# backend/runtime.py
from __future__ import annotations

from functools import lru_cache

import config
from exceptions import ConfigurationError
from logger import logger

MISSING_CREDENTIAL_MESSAGE = "AI API key not configured"


@lru_cache(maxsize=4)
def _openai_chat(model: str, temperature: float, api_key: str):
    from langchain_openai import ChatOpenAI

    return ChatOpenAI(model=model, temperature=temperature, api_key=api_key)


@lru_cache(maxsize=4)
def _nvidia_chat(model: str, temperature: float, api_key: str):
    from langchain_nvidia_ai_endpoints import ChatNVIDIA

    return ChatNVIDIA(model=model, temperature=temperature, api_key=api_key)


def llm_provider_name() -> str | None:
    if (config.OPENAI_API_KEY or "").strip():
        return "openai"
    if (config.NVIDIA_API_KEY or "").strip():
        return "nvidia"
    return None


def get_llm():
    """
    Canonical LLM selector:
      - If OPENAI_API_KEY is set -> OpenAI Chat
      - Else if NVIDIA_API_KEY is set -> NVIDIA Chat
      - Else -> ConfigurationError (summarization cannot run)
    """
    provider = llm_provider_name()

    if provider == "openai":
        return _openai_chat(config.OPENAI_MODEL, config.LLM_TEMPERATURE, config.OPENAI_API_KEY.strip())
    if provider == "nvidia":
        return _nvidia_chat(config.NVIDIA_MODEL, config.LLM_TEMPERATURE, config.NVIDIA_API_KEY.strip())

    logger.error("No generative AI credential configured (set OPENAI_API_KEY or NVIDIA_API_KEY)")
    raise ConfigurationError(MISSING_CREDENTIAL_MESSAGE)
