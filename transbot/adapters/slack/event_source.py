"""Slack Socket Mode event source — feeds envelopes into an asyncio.Queue.

Reconnects and heartbeats belong to slack_sdk's SocketModeClient; this
adapter only converts each request it delivers into an Envelope and
buffers it for the Dispatcher.
"""

import asyncio
import sys
from typing import Optional

from slack_sdk.socket_mode.aiohttp import SocketModeClient
from slack_sdk.socket_mode.request import SocketModeRequest

from transbot.ports.inbound import Envelope


def _log(msg: str):
    print(f"[slack] {msg}", file=sys.stderr)


# Queued after the last envelope once the source is stopped
_CLOSED = object()


def to_envelope(req: SocketModeRequest) -> Envelope:
    return Envelope(type=req.type, envelope_id=req.envelope_id, payload=req.payload or {})


class SlackEventSource:
    """EnvelopeSourcePort implementation backed by a SocketModeClient.

    ``maxsize`` 0 leaves the queue unbounded. A positive value bounds it;
    the SDK listener then waits for room instead of dropping envelopes.
    """

    def __init__(self, client: SocketModeClient, maxsize: int = 0):
        self._client = client
        self._queue: asyncio.Queue = asyncio.Queue(maxsize=maxsize)
        self._closing = False
        self._drained = False
        self._disconnected = False
        client.socket_mode_request_listeners.append(self._on_request)

    def qsize(self) -> int:
        return self._queue.qsize()

    async def _on_request(self, client: SocketModeClient, req: SocketModeRequest) -> None:
        if self._closing:
            _log(f"source stopped, not queueing {req.type} envelope {req.envelope_id}")
            return
        await self._queue.put(to_envelope(req))

    async def receive_envelope(self) -> Optional[Envelope]:
        if self._drained:
            return None
        item = await self._queue.get()
        if item is _CLOSED:
            self._drained = True
            return None
        return item

    async def connect(self) -> None:
        await self._client.connect()
        _log("socket mode connected")

    async def stop(self) -> None:
        """Stop queueing new envelopes; those already queued are still delivered.

        The connection stays open so the queued envelopes can be acknowledged.
        """
        if self._closing:
            return
        self._closing = True
        await self._queue.put(_CLOSED)
        _log("source stopped, draining queued envelopes")

    async def disconnect(self) -> None:
        """Close the Socket Mode connection. Call once the dispatcher has returned."""
        if self._disconnected:
            return
        self._disconnected = True
        await self._client.close()
        _log("socket mode closed")
