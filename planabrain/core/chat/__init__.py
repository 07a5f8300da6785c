"""
Chat paths that bypass the local index.

Exports: answer_with_web_search, message_text
"""

from .messages import message_text
from .web_search import answer_with_web_search

__all__ = ["answer_with_web_search", "message_text"]
