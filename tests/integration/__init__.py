"""Integration tests for components working together as a system.

Coverage:
    - HTTP host with real ASGI requests
    - Conversation against a live Gemini session (when configured)

Requires GEMINI_API_KEY for the live tests; they are skipped otherwise.
"""
