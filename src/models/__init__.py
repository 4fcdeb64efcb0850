"""Pydantic models for conversation state.

Models:
    - Message: Individual message in the conversation
    - ConversationSnapshot: What observers see after each mutation
    - Role, ConversationStatus: Enumerations used by both
"""

from src.models.schemas import (
    ConversationSnapshot,
    ConversationStatus,
    Message,
    Role,
    new_message_id,
)

__all__ = [
    "ConversationSnapshot",
    "ConversationStatus",
    "Message",
    "Role",
    "new_message_id",
]
