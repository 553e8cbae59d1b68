"""Port interfaces (Hexagonal Architecture)."""

from transbot.ports.inbound import AcknowledgerPort, Envelope, EnvelopeSourcePort, MentionEvent
from transbot.ports.outbound import ChatPort, HttpClientPort, PostResult, ResponderPort, TranslatorPort

__all__ = [
    "AcknowledgerPort",
    "Envelope",
    "EnvelopeSourcePort",
    "MentionEvent",
    "ChatPort",
    "HttpClientPort",
    "PostResult",
    "ResponderPort",
    "TranslatorPort",
]
