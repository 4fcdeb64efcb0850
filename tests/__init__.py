"""Test package for Gemini Chat.

Structure:
    - unit/: Individual function and class tests
    - integration/: HTTP host and live Gemini tests

Uses scripted fake sessions for the conversation state machine.
Leverages pytest with pytest-check for soft assertions.
"""
