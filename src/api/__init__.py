"""FastAPI host for the chat widget.

Serves the NiceGUI chat page and a health endpoint.

Endpoints:
    - GET /health: Service health status
    - GET /: Chat page (mounted by NiceGUI)
"""

from src.api.app import create_app

__all__ = ["create_app"]
