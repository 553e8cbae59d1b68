"""Launcher — wires Slack, Papago and the Dispatcher together and runs them."""

import asyncio
import signal
import sys
from typing import Optional

import uvicorn
from slack_sdk.errors import SlackApiError
from slack_sdk.socket_mode.aiohttp import SocketModeClient
from slack_sdk.web.async_client import AsyncWebClient

from transbot.adapters.papago import PapagoClient
from transbot.adapters.slack import SlackChat, SlackEventSource, SlackResponder, SocketModeAcknowledger
from transbot.adapters.web import create_app
from transbot.config import AppConfig
from transbot.domain.dispatcher import Dispatcher
from transbot.errors import ConfigError


def _log(msg: str):
    print(msg, file=sys.stderr)


async def _serve_status(server: uvicorn.Server, source: SlackEventSource):
    await server.serve()
    # Status server stopped on a signal: let the dispatcher drain and return
    await source.stop()


def _install_signal_handlers(loop: asyncio.AbstractEventLoop, source: SlackEventSource):
    pending = set()

    def _request_stop(signame: str):
        _log(f"{signame} received, finishing queued envelopes")
        task = loop.create_task(source.stop())
        pending.add(task)
        task.add_done_callback(pending.discard)

    installed = []
    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(sig, _request_stop, sig.name)
        except NotImplementedError:
            _log(f"Signal handlers unsupported on this platform, {sig.name} not handled")
            continue
        installed.append(sig)
    return installed


async def run_until_stopped(
    dispatcher: Dispatcher,
    source: SlackEventSource,
    server: Optional[uvicorn.Server] = None,
):
    """Run the dispatcher until SIGINT/SIGTERM, then drain, ack and disconnect.

    The Socket Mode connection is closed only after the dispatcher has
    returned, so every drained envelope is still acknowledged.
    """
    loop = asyncio.get_running_loop()
    installed = _install_signal_handlers(loop, source)
    try:
        if server is None:
            await dispatcher.run()
        else:
            await asyncio.gather(dispatcher.run(), _serve_status(server, source))
    finally:
        for sig in installed:
            loop.remove_signal_handler(sig)
        if server is not None:
            server.should_exit = True
        await source.disconnect()


async def run_bot(config: Optional[AppConfig] = None):
    """Validate config, connect to Slack and run until stopped by a signal."""
    config = (config or AppConfig.from_env()).validate()

    web_client = AsyncWebClient(token=config.slack.bot_token)
    chat = SlackChat(web_client)
    bot_user_id = await chat.bot_user_id()
    _log(f"Authenticated as bot user {bot_user_id}")

    socket_client = SocketModeClient(app_token=config.slack.app_token, web_client=web_client)
    source = SlackEventSource(socket_client, maxsize=config.dispatch.queue_maxsize)
    translator = PapagoClient(
        api_key_id=config.translator.api_key_id,
        api_key_secret=config.translator.api_key_secret,
        api_url=config.translator.api_url,
    )
    dispatcher = Dispatcher(
        source=source,
        acknowledger=SocketModeAcknowledger(socket_client),
        translator=translator,
        responder=SlackResponder(chat),
        bot_user_id=bot_user_id,
    )

    server = None
    if config.dispatch.health_port:
        server = uvicorn.Server(uvicorn.Config(
            create_app(dispatcher, source),
            host="0.0.0.0",
            port=config.dispatch.health_port,
            log_level="warning",
        ))
        _log(f"Status server on port {config.dispatch.health_port}")

    await source.connect()
    _log("Bot is running")

    try:
        await run_until_stopped(dispatcher, source, server)
    finally:
        await translator.close()


def main():
    try:
        asyncio.run(run_bot())
    except ConfigError as e:
        _log(f"Startup failed: {e}")
        sys.exit(1)
    except SlackApiError as e:
        _log(f"Slack rejected the bot credentials: {e.response.get('error')}")
        sys.exit(1)
    except KeyboardInterrupt:
        _log("Interrupted, shutting down")


if __name__ == "__main__":
    main()
