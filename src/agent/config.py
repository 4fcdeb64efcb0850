"""Chat configuration with environment variable loading.

Pydantic-based configuration for the Gemini chat session.
The config is built once at startup and handed to whatever needs it;
nothing else reads credentials from the environment.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

# Load environment variables from .env file
load_dotenv()

DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_SYSTEM_INSTRUCTION = (
    "You are a helpful and friendly AI assistant. "
    "Keep your responses concise and informative."
)


def _api_key_from_env() -> str:
    return (
        os.getenv("GEMINI_API_KEY")
        or os.getenv("GOOGLE_API_KEY")
        or os.getenv("API_KEY")
        or ""
    )


class ChatConfig(BaseModel):
    """Configuration for the Gemini chat session.

    Attributes:
        api_key: Gemini API key.
        model_name: Gemini model identifier.
        system_instruction: System instruction sent with every session.
        temperature: Sampling temperature (0.0 = deterministic, 2.0 = creative).
    """

    api_key: str = Field(
        default_factory=_api_key_from_env,
        description="API key for the Gemini API",
    )
    model_name: str = Field(
        default_factory=lambda: os.getenv("GEMINI_MODEL", DEFAULT_MODEL),
        description="Model to use",
    )
    system_instruction: str = Field(
        default_factory=lambda: os.getenv(
            "GEMINI_SYSTEM_INSTRUCTION", DEFAULT_SYSTEM_INSTRUCTION
        ),
        description="System instruction for the chat session",
    )
    temperature: float = Field(
        default=1.0,
        ge=0.0,
        le=2.0,
        description="Sampling temperature for response generation",
    )

    @field_validator("api_key")
    @classmethod
    def validate_api_key(cls, v: str) -> str:
        """Validate that API key is provided and non-empty."""
        if not v or not v.strip():
            raise ValueError(
                "API key required. Set GEMINI_API_KEY (or API_KEY) in .env"
            )
        return v.strip()

    @field_validator("system_instruction")
    @classmethod
    def validate_system_instruction(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("System instruction must not be empty")
        return v


class ConfigError(BaseModel):
    """Why a ChatConfig could not be built.

    Attributes:
        message: Human-readable description of every failed field.
    """

    message: str


def load_chat_config(**overrides: object) -> ChatConfig | ConfigError:
    """Create chat configuration from environment and explicit overrides.

    Validation problems are returned rather than raised so the caller
    decides how fatal they are.

    Args:
        **overrides: Field values taking precedence over the environment.

    Returns:
        A valid ChatConfig, or a ConfigError describing what is missing.
    """
    try:
        return ChatConfig(**overrides)
    except ValidationError as e:
        reasons = "; ".join(
            f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}"
            for err in e.errors()
        )
        return ConfigError(message=f"Invalid chat configuration ({reasons})")
