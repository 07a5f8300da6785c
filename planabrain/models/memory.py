"""
Conversation memory models.

Dependencies: pydantic
System role: Per-user chat history file schema
"""

from typing import Literal

from pydantic import BaseModel, Field

MEMORY_VERSION = 1


class StoredChatMessage(BaseModel):
    """One remembered chat turn."""

    role: Literal["human", "ai"] = Field(description="Message author")
    content: str = Field(description="Message text")
    at: int = Field(description="Creation time in epoch milliseconds")


class StoredChatFile(BaseModel):
    """On-disk per-user memory document."""

    version: Literal[1] = Field(default=MEMORY_VERSION, description="Memory format version")
    messages: list[StoredChatMessage] = Field(default_factory=list)
