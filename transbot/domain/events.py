"""Envelope decoding — turns raw gateway envelopes into mention events."""

import re
from typing import Optional

from transbot.ports.inbound import (
    APP_MENTION,
    EVENT_CALLBACK,
    EVENTS_API,
    Envelope,
    MentionEvent,
)

# <@U123ABC> or <@U123ABC|name>
_USER_MENTION_PATTERN = re.compile(r"<@[A-Z0-9]+(?:\|[^>]*)?>")


def strip_mentions(text: str) -> str:
    """Remove user-mention markup and collapse surrounding whitespace."""
    return " ".join(_USER_MENTION_PATTERN.sub(" ", text).split())


def decode_mention(envelope: Envelope, bot_user_id: Optional[str] = None) -> Optional[MentionEvent]:
    """Decode an app-mention envelope, or return None for anything else.

    Lifecycle envelopes, other callback types and inner events missing
    their channel or timestamp all decode to None.
    """
    if envelope.type != EVENTS_API:
        return None

    payload = envelope.payload or {}
    if payload.get("type") != EVENT_CALLBACK:
        return None

    event = payload.get("event")
    if not isinstance(event, dict) or event.get("type") != APP_MENTION:
        return None

    channel_id = event.get("channel")
    ts = event.get("ts")
    text = event.get("text") or ""
    if not channel_id or not ts or not isinstance(text, str):
        return None

    user_id = event.get("user") or ""
    bot_id = event.get("bot_id") or None
    is_self = bool(bot_user_id) and user_id == bot_user_id

    return MentionEvent(
        text=text,
        channel_id=channel_id,
        ts=ts,
        thread_ts=event.get("thread_ts") or None,
        user_id=user_id,
        bot_id=bot_id,
        author_is_bot=bool(bot_id) or is_self,
    )
