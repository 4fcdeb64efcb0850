"""NiceGUI interface - thin visualization layer for the conversation.

Responsibilities:
    - Rendering conversation snapshots as chat bubbles
    - Input and send affordances driven by the pending flag
    - Typing indicator and auto-scroll while a reply streams

Contains no conversation logic. Subscribes to the controller and redraws.
"""
