"""
Web-search grounded answers with per-user memory.

Bypasses the local index: binds Gemini's Google Search tool to the chat
model and replays the user's bounded conversation history.

Dependencies: langchain_core.messages, planabrain.boundary
System role: Web-search chat orchestration
"""

import logging

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage

from planabrain.boundary.gemini import create_chat_model, create_google_search_tool
from planabrain.boundary.memory_store import append_user_memory, load_user_memory, now_ms
from planabrain.configs.settings import Settings
from planabrain.core.chat.messages import message_text
from planabrain.models.memory import StoredChatMessage
from planabrain.observability.log_utils import safe_log_value

logger = logging.getLogger(__name__)


def _memory_active(settings: Settings) -> bool:
    return settings.memory.enabled and settings.memory.max_messages > 0


def answer_with_web_search(
    question: str,
    settings: Settings,
    user_id: str | None = None,
    chat_model: BaseChatModel | None = None,
) -> str:
    """
    Answer a question with the web-search enabled chat model.

    Args:
        question: User's question
        settings: Application settings
        user_id: Memory owner ("default" if None)
        chat_model: Chat model override (Gemini from settings if None)

    Returns:
        str: Chat model answer
    """
    model = chat_model or create_chat_model(settings.gemini)
    llm = model.bind_tools([create_google_search_tool()])

    user = user_id or "default"
    memory_dir = settings.memory.dir or ""
    history = (
        load_user_memory(memory_dir, user, settings.memory.max_messages)
        if _memory_active(settings)
        else []
    )
    logger.info(
        f"{__name__}:answer_with_web_search - user={user}, history={len(history)}, "
        f"question={safe_log_value(question, max_length=80)}"
    )

    messages: list[BaseMessage] = [SystemMessage(content=settings.system_prompt)]
    for m in history:
        messages.append(AIMessage(content=m.content) if m.role == "ai" else HumanMessage(content=m.content))
    messages.append(HumanMessage(content=question))

    answer = message_text(llm.invoke(messages))

    if _memory_active(settings):
        append_user_memory(
            memory_dir,
            user,
            settings.memory.max_messages,
            [
                StoredChatMessage(role="human", content=question, at=now_ms()),
                StoredChatMessage(role="ai", content=answer, at=now_ms()),
            ],
        )

    return answer
