"""Papago translation adapter — implements TranslatorPort."""

from transbot.adapters.papago.client import PapagoClient, PapagoResponse

__all__ = ["PapagoClient", "PapagoResponse"]
