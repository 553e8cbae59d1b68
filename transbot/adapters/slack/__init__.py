"""Slack adapters — Socket Mode event source, acknowledgment and replies."""

from transbot.adapters.slack.acknowledger import SocketModeAcknowledger
from transbot.adapters.slack.event_source import SlackEventSource, to_envelope
from transbot.adapters.slack.responder import SlackChat, SlackResponder

__all__ = [
    "SocketModeAcknowledger",
    "SlackEventSource",
    "to_envelope",
    "SlackChat",
    "SlackResponder",
]
