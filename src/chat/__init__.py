"""Conversation state for the chat widget.

Holds the message list, guards against overlapping sends, and folds
streamed reply fragments into the conversation.
"""

from src.chat.controller import (
    ERROR_TEXT,
    GREETING_TEXT,
    ConversationController,
    can_send,
    create_conversation,
)

__all__ = [
    "ERROR_TEXT",
    "GREETING_TEXT",
    "ConversationController",
    "can_send",
    "create_conversation",
]
