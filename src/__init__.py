"""Gemini Chat - a small web chat widget streaming replies from Google Gemini.

Combines NiceGUI for the chat page, Agno for the model session,
FastAPI for hosting, and Pydantic for configuration and state.

Components:
    - agent: Gemini session configuration and streaming
    - chat: Conversation state machine driving one send at a time
    - ui: Web interface rendering conversation snapshots
    - api: HTTP host for the page and health checks
    - models: Message and snapshot schemas
"""

__version__ = "0.1.0"
