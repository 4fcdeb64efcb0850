"""Unit tests for individual components in isolation.

Coverage:
    - agent/: Configuration validation and session streaming
    - chat/: Conversation send cycle, fragment folding, failures
    - models/: Message and snapshot behavior

Uses mocks for Agno and fake sessions instead of the Gemini API.
"""
