"""
Configuration management module.

Provides centralized, type-safe configuration using Pydantic Settings.
All config modules support environment variable mapping with validation.
"""

from planabrain.configs.gemini import GeminiSettings
from planabrain.configs.memory import MemorySettings
from planabrain.configs.retrieval import RetrievalSettings
from planabrain.configs.settings import Settings, get_settings

__all__ = [
    "GeminiSettings",
    "MemorySettings",
    "RetrievalSettings",
    "Settings",
    "get_settings",
]
