"""
Chat message helpers.

Dependencies: langchain_core.messages
System role: Extracts plain text from chat model responses
"""

from langchain_core.messages import BaseMessage


def message_text(message: BaseMessage) -> str:
    """
    Return the textual content of a chat model response.

    Gemini may answer with a list of content blocks; text blocks are
    concatenated and other block types ignored.
    """
    content = message.content
    if isinstance(content, str):
        return content

    parts: list[str] = []
    for block in content:
        if isinstance(block, str):
            parts.append(block)
        elif isinstance(block, dict) and block.get("type", "text") == "text":
            parts.append(str(block.get("text", "")))
    return "".join(parts)
