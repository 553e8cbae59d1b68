"""Inbound port — gateway-agnostic envelope and mention representation."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Protocol, runtime_checkable

# Envelope type tags
EVENTS_API = "events_api"

# events_api payload / inner event type tags
EVENT_CALLBACK = "event_callback"
APP_MENTION = "app_mention"


@dataclass
class Envelope:
    """One unit of delivery from the chat gateway; must be acknowledged once."""

    type: str
    envelope_id: Optional[str] = None
    payload: Dict[str, Any] = field(default_factory=dict)


@dataclass
class MentionEvent:
    """The bot being mentioned in a conversation."""

    text: str
    channel_id: str
    ts: str
    thread_ts: Optional[str] = None
    user_id: str = ""
    bot_id: Optional[str] = None
    author_is_bot: bool = False


@runtime_checkable
class EnvelopeSourcePort(Protocol):
    """Interface for the live stream of envelopes."""

    async def receive_envelope(self) -> Optional[Envelope]:
        """Wait for the next envelope; None once the stream is closed."""
        ...


@runtime_checkable
class AcknowledgerPort(Protocol):
    """Interface for confirming receipt of an envelope to the gateway."""

    async def ack(self, envelope: Envelope) -> None: ...
