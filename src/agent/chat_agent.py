"""Agno-backed Gemini chat sessions with streaming support.

A session is a stateful handle to one ongoing exchange with the model.
It is created once per conversation and reused for every send, so the
model sees earlier turns without the caller resending them.

Architecture Decisions:

1. **In-memory storage** - Agno's Agent only carries history across runs
   when it has a db. Conversations here are never persisted, so an
   InMemoryDb keyed by a per-session id is enough and vanishes with the
   process.

2. **One session per handle** - No module-level singleton. Whoever owns the
   conversation owns the session and the config it was built from.

3. **Errors propagate** - Agno reports provider failures either by raising
   or by emitting a RunError event. Both reach the caller as exceptions so
   the conversation layer can decide what the user sees.

4. **Content-only stream** - Agno yields run events with metadata. We pass
   on just the non-empty content strings of RunContent events.
"""

import logging
import uuid
from collections.abc import AsyncIterator
from typing import Protocol, runtime_checkable

from agno.agent import Agent
from agno.db.in_memory import InMemoryDb
from agno.models.google import Gemini
from agno.run.agent import RunEvent

from src.agent.config import ChatConfig

logger = logging.getLogger(__name__)

# History config: include the last 10 runs (~10 conversation turns)
_NUM_HISTORY_RUNS = 10


class ChatStreamError(Exception):
    """The provider reported a failure while producing a reply."""


@runtime_checkable
class ChatSession(Protocol):
    """Handle accepting a message and streaming back the reply."""

    def send_streaming(self, text: str) -> AsyncIterator[str]:
        """Stream reply fragments for a message.

        Args:
            text: The user's message.

        Yields:
            Text fragments in the order the provider delivers them.
        """
        ...


class AgentChatSession:
    """Chat session wrapping an Agno agent running a Gemini model.

    Wraps Agno's Agent with:
    - In-memory session history keyed by a per-handle session id
    - The configured system instruction on every run
    - A plain string stream for the conversation controller
    """

    def __init__(self, config: ChatConfig) -> None:
        """Initialize the session.

        Args:
            config: Validated chat configuration.
        """
        self._config = config
        self.session_id: str = uuid.uuid4().hex
        self._agent = self._create_agent()

    def _create_agent(self) -> Agent:
        """Create the Agno agent instance.

        Returns:
            Configured Agent with a Gemini model and in-memory history.
        """
        model = Gemini(
            id=self._config.model_name,
            api_key=self._config.api_key,
            temperature=self._config.temperature,
        )

        return Agent(
            model=model,
            db=InMemoryDb(),
            instructions=self._config.system_instruction,
            add_history_to_context=True,
            num_history_runs=_NUM_HISTORY_RUNS,
            markdown=True,
        )

    async def send_streaming(self, text: str) -> AsyncIterator[str]:
        """Stream response fragments for a message.

        Args:
            text: The user's message.

        Yields:
            Non-empty response text fragments as they arrive.

        Raises:
            ChatStreamError: If the agent emits a run error event.
        """
        response_stream = self._agent.arun(
            text,
            session_id=self.session_id,
            stream=True,
        )

        async for chunk in response_stream:
            event = getattr(chunk, "event", None)
            content = getattr(chunk, "content", None)
            if event == RunEvent.run_error:
                raise ChatStreamError(str(content or "Run failed"))
            if event != RunEvent.run_content:
                continue
            if isinstance(content, str) and content:
                yield content


def create_chat_session(config: ChatConfig) -> AgentChatSession:
    """Create a new chat session from configuration.

    Args:
        config: Validated chat configuration.

    Returns:
        A fresh AgentChatSession with empty history.
    """
    session = AgentChatSession(config)
    logger.info(
        f"Created chat session {session.session_id[:8]} with model {config.model_name}"
    )
    return session
