import uuid
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Role(str, Enum):
    """Who authored a message."""

    USER = "user"
    MODEL = "model"


class ConversationStatus(str, Enum):
    """Where the conversation is in its send cycle."""

    IDLE = "idle"
    SENDING = "sending"
    STREAMING = "streaming"


def new_message_id() -> str:
    """Mint a message identifier that is never recomputed."""
    return uuid.uuid4().hex


class Message(BaseModel):
    """A single chat message.

    Messages are frozen; a growing reply is represented by successive
    copies sharing the same id.

    Attributes:
        id: Opaque unique token, minted once.
        role: The speaker (user or model).
        text: The message text.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_message_id)
    role: Role
    text: str = ""

    def with_appended(self, fragment: str) -> "Message":
        """Return a copy with fragment appended to the text."""
        return self.model_copy(update={"text": self.text + fragment})


class ConversationSnapshot(BaseModel):
    """Immutable view of the conversation handed to observers.

    Attributes:
        messages: Messages in creation order.
        pending: Whether a send is in flight.
        status: Current step of the send cycle.
    """

    model_config = ConfigDict(frozen=True)

    messages: tuple[Message, ...]
    pending: bool
    status: ConversationStatus = ConversationStatus.IDLE
