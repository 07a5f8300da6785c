"""
Gemini boundary adapters.

Exports: create_chat_model, create_embeddings, create_google_search_tool
"""

from .clients import create_chat_model, create_embeddings, create_google_search_tool

__all__ = ["create_chat_model", "create_embeddings", "create_google_search_tool"]
