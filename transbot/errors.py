"""Exception hierarchy."""


class TransbotError(Exception):
    """Base class for errors raised by this package"""


class ConfigError(TransbotError):
    """Raised at startup when required settings are missing or invalid"""


class TranslationError(TransbotError):
    """Raised when a translation could not be obtained"""


class TranslationTransportError(TranslationError):
    """Network failure or non-2xx response from the translation service"""


class TranslationDecodeError(TranslationError):
    """Translation response body was not the expected JSON shape"""
