"""Web adapters — status server."""

from transbot.adapters.web.server import create_app

__all__ = ["create_app"]
