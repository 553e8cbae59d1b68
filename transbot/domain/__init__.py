"""Domain layer — pure Python, no framework dependencies."""

from transbot.domain.dispatcher import Dispatcher
from transbot.domain.events import decode_mention, strip_mentions
from transbot.domain.language import Language, detect_language
from transbot.domain.models import DispatchStats, ReplyTarget, TranslationRequest, TranslationResult

__all__ = [
    "Dispatcher",
    "decode_mention",
    "strip_mentions",
    "Language",
    "detect_language",
    "DispatchStats",
    "ReplyTarget",
    "TranslationRequest",
    "TranslationResult",
]
