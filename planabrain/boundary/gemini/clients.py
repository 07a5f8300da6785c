"""
Google Gemini client factories.

Builds LangChain chat and embedding clients from settings, plus the
built-in Google Search tool declaration for grounded answers.

Dependencies: langchain_google_genai, planabrain.configs
System role: Hosted model adapters (chat, embeddings, web search)
"""

import logging
from typing import Any

from langchain_google_genai import ChatGoogleGenerativeAI, GoogleGenerativeAIEmbeddings

from planabrain.configs.gemini import GeminiSettings
from planabrain.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def _require_api_key(settings: GeminiSettings) -> str:
    if not settings.google_api_key:
        raise ConfigurationError(
            "GOOGLE_API_KEY is required (or GEMINI_API_KEY)",
            setting="GOOGLE_API_KEY",
        )
    return settings.google_api_key


def create_embeddings(settings: GeminiSettings) -> GoogleGenerativeAIEmbeddings:
    """
    Create the Gemini embeddings client.

    Args:
        settings: Gemini settings (embedding model and API key)

    Returns:
        GoogleGenerativeAIEmbeddings: Client exposing embed_query/embed_documents

    Raises:
        ConfigurationError: When no API key is configured
    """
    api_key = _require_api_key(settings)
    logger.debug(f"{__name__}:create_embeddings - model={settings.embedding_model}")
    return GoogleGenerativeAIEmbeddings(
        model=settings.embedding_model,
        google_api_key=api_key,
    )


def create_chat_model(settings: GeminiSettings) -> ChatGoogleGenerativeAI:
    """
    Create the Gemini chat model.

    Args:
        settings: Gemini settings (chat model, temperature and API key)

    Returns:
        ChatGoogleGenerativeAI: LangChain chat model

    Raises:
        ConfigurationError: When no API key is configured
    """
    api_key = _require_api_key(settings)
    logger.debug(f"{__name__}:create_chat_model - model={settings.model}")
    return ChatGoogleGenerativeAI(
        model=settings.model,
        google_api_key=api_key,
        temperature=settings.temperature,
    )


def create_google_search_tool() -> dict[str, Any]:
    """Gemini built-in Google Search grounding tool, for bind_tools()."""
    return {"google_search": {}}
