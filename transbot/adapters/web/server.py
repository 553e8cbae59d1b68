"""FastAPI application exposing health and dispatch status."""

from fastapi import FastAPI

from transbot.adapters.web.status_routes import status_router
from transbot.config import __version__


def create_app(dispatcher=None, source=None) -> FastAPI:
    app = FastAPI(title="Translation Slackbot", version=__version__)
    app.state.dispatcher = dispatcher
    app.state.source = source
    app.include_router(status_router)
    return app
