"""Conversation controller: one send/stream cycle at a time.

Owns the ordered message list and the pending flag, folds streamed
fragments into the trailing model message, and publishes an immutable
snapshot to subscribers after every mutation.

Send cycle:
    idle -> sending (reply requested) -> streaming (fragments arriving) -> idle

A failed cycle also ends in idle, with the partial reply replaced by a
fixed error message.
"""

import asyncio
import logging
from collections.abc import Callable

from src.agent.chat_agent import ChatSession, create_chat_session
from src.agent.config import ChatConfig
from src.models.schemas import ConversationSnapshot, ConversationStatus, Message, Role

logger = logging.getLogger(__name__)

GREETING_TEXT = "Hello! How can I help you today?"
ERROR_TEXT = "Sorry, something went wrong. Please try again."

SnapshotCallback = Callable[[ConversationSnapshot], None]


def can_send(snapshot: ConversationSnapshot, text: str | None) -> bool:
    """Whether the send affordance should be enabled."""
    return not snapshot.pending and bool(text and text.strip())


class ConversationController:
    """Drives a single conversation against a chat session."""

    def __init__(
        self,
        session: ChatSession | None = None,
        greeting: str | None = GREETING_TEXT,
    ) -> None:
        """Initialize the conversation.

        Args:
            session: Chat session to send through. Sends are ignored
                until one is present.
            greeting: Text of the seeded model message, or None for an
                empty conversation.
        """
        self._session = session
        self._messages: list[Message] = []
        if greeting:
            self._messages.append(Message(role=Role.MODEL, text=greeting))
        self._pending = False
        self._status = ConversationStatus.IDLE
        self._subscribers: list[SnapshotCallback] = []
        self._task: asyncio.Task[None] | None = None

    @property
    def pending(self) -> bool:
        return self._pending

    @property
    def messages(self) -> tuple[Message, ...]:
        return tuple(self._messages)

    @property
    def session(self) -> ChatSession | None:
        return self._session

    def snapshot(self) -> ConversationSnapshot:
        """Return the current state as an immutable snapshot."""
        return ConversationSnapshot(
            messages=tuple(self._messages),
            pending=self._pending,
            status=self._status,
        )

    def subscribe(self, callback: SnapshotCallback) -> Callable[[], None]:
        """Register a callback invoked with every new snapshot.

        Args:
            callback: Called synchronously after each mutation.

        Returns:
            A function that removes the callback again.
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def submit(self, text: str) -> asyncio.Task[None] | None:
        """Start a send cycle without waiting for the reply.

        Must be called from a running event loop. Blank text, a send
        already in flight, or a missing session make this a no-op.

        Args:
            text: The user's message; surrounding whitespace is dropped.

        Returns:
            The task consuming the reply stream, or None if ignored.
        """
        trimmed = text.strip() if text else ""
        if not trimmed or self._pending or self._session is None:
            logger.debug("Ignoring send: blank text, pending reply or no session")
            return None

        reply = Message(role=Role.MODEL)
        self._messages.append(Message(role=Role.USER, text=trimmed))
        self._pending = True
        self._status = ConversationStatus.SENDING
        self._messages.append(reply)

        self._task = asyncio.create_task(
            self._stream_reply(self._session, trimmed, reply.id)
        )
        self._task.add_done_callback(lambda task: self._settle_cancelled(task, reply.id))
        return self._task

    async def send(self, text: str) -> bool:
        """Run a full send cycle and wait for it to finish.

        Args:
            text: The user's message.

        Returns:
            True if the send was accepted, False if it was ignored.
        """
        task = self.submit(text)
        if task is None:
            return False
        await task
        return True

    async def _stream_reply(
        self, session: ChatSession, text: str, reply_id: str
    ) -> None:
        # Subscriber failures here end the cycle like a stream failure
        try:
            self._publish()
            async for fragment in session.send_streaming(text):
                if not fragment:
                    continue
                self._append_to_reply(reply_id, fragment)
        except asyncio.CancelledError:
            logger.warning(f"Reply {reply_id[:8]} cancelled")
            self._replace_with_error(reply_id)
            raise
        except Exception:
            logger.exception("Error streaming reply")
            self._replace_with_error(reply_id)
        else:
            logger.info(f"Reply {reply_id[:8]} complete")
        finally:
            self._pending = False
            self._status = ConversationStatus.IDLE
            self._publish()

    def _settle_cancelled(self, task: asyncio.Task[None], reply_id: str) -> None:
        # A task cancelled before its first step never runs _stream_reply
        if not task.cancelled() or self._index_of(reply_id) is None:
            return
        self._replace_with_error(reply_id)
        self._pending = False
        self._status = ConversationStatus.IDLE
        self._publish()

    def _index_of(self, message_id: str) -> int | None:
        for index, message in enumerate(self._messages):
            if message.id == message_id:
                return index
        return None

    def _append_to_reply(self, reply_id: str, fragment: str) -> None:
        index = self._index_of(reply_id)
        if index is None:
            return
        self._messages[index] = self._messages[index].with_appended(fragment)
        self._status = ConversationStatus.STREAMING
        self._publish()

    def _replace_with_error(self, reply_id: str) -> None:
        self._messages = [m for m in self._messages if m.id != reply_id]
        self._messages.append(Message(role=Role.MODEL, text=ERROR_TEXT))

    def _publish(self) -> None:
        snapshot = self.snapshot()
        for callback in list(self._subscribers):
            callback(snapshot)


def create_conversation(config: ChatConfig) -> ConversationController:
    """Create a conversation with its own Gemini session.

    Args:
        config: Validated chat configuration.

    Returns:
        A ConversationController seeded with the greeting.
    """
    return ConversationController(session=create_chat_session(config))
