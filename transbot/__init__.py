"""Translation Slackbot — Korean/English relay for Slack mentions."""

from transbot.config import __version__, AppConfig
from transbot.domain import Dispatcher, Language, detect_language
from transbot.errors import (
    ConfigError,
    TransbotError,
    TranslationDecodeError,
    TranslationError,
    TranslationTransportError,
)

__all__ = [
    "__version__",
    "AppConfig",
    "Dispatcher",
    "Language",
    "detect_language",
    "ConfigError",
    "TransbotError",
    "TranslationDecodeError",
    "TranslationError",
    "TranslationTransportError",
]
