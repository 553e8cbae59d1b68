"""Outbound ports — interfaces for external system adapters."""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Protocol, runtime_checkable


@dataclass
class PostResult:
    """Result of posting a reply message."""

    success: bool
    channel_id: Optional[str] = None
    ts: Optional[str] = None
    error: Optional[str] = None


@runtime_checkable
class TranslatorPort(Protocol):
    """Interface for machine-translation backends."""

    async def translate(self, source: str, target: str, text: str) -> str: ...


@runtime_checkable
class ChatPort(Protocol):
    """Interface for sending messages into a conversation."""

    async def post_message(
        self,
        channel_id: str,
        text: str,
        thread_ts: Optional[str] = None,
    ) -> Dict[str, Any]: ...


@runtime_checkable
class ResponderPort(Protocol):
    """Interface for replying inside a conversation thread."""

    async def reply(self, channel_id: str, text: str, thread_ts: str) -> PostResult: ...


@runtime_checkable
class HttpClientPort(Protocol):
    """The subset of aiohttp.ClientSession used for outbound requests.

    ``post`` returns an async context manager yielding a response with
    ``status`` and ``read()``.
    """

    def post(
        self,
        url: str,
        *,
        data: Any = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Any: ...
