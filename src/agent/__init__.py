"""Gemini session logic for the chat widget.

Responsibilities:
    - Configuration loading and validation
    - Session creation with a fixed model and system instruction
    - Streaming reply fragments from the provider

Leverages the Agno framework for the model session lifecycle.
Maintains clean separation from the conversation and UI layers.
"""

from src.agent.chat_agent import (
    AgentChatSession,
    ChatSession,
    ChatStreamError,
    create_chat_session,
)
from src.agent.config import ChatConfig, ConfigError, load_chat_config

__all__ = [
    "AgentChatSession",
    "ChatConfig",
    "ChatSession",
    "ChatStreamError",
    "ConfigError",
    "create_chat_session",
    "load_chat_config",
]
