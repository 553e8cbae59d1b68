"""Papago (Naver Cloud) machine-translation client using aiohttp."""

import asyncio
import sys
from typing import Dict, Optional

import aiohttp
from pydantic import BaseModel, Field, ValidationError

from transbot.config import PAPAGO_TRANSLATION_URL
from transbot.errors import TranslationDecodeError, TranslationTransportError
from transbot.ports.outbound import HttpClientPort

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded; charset=UTF-8"
API_KEY_ID_HEADER = "X-NCP-APIGW-API-KEY-ID"
API_KEY_HEADER = "X-NCP-APIGW-API-KEY"


def _log(msg: str):
    print(f"[papago] {msg}", file=sys.stderr)


class PapagoResult(BaseModel):
    translated_text: str = Field(alias="translatedText")


class PapagoMessage(BaseModel):
    result: PapagoResult


class PapagoResponse(BaseModel):
    """The subset of a Papago translation response this client reads."""

    message: PapagoMessage


class PapagoClient:
    """Async Papago client. One POST per ``translate`` call, no retries."""

    def __init__(
        self,
        api_key_id: str,
        api_key_secret: str,
        api_url: str = PAPAGO_TRANSLATION_URL,
        session: Optional[HttpClientPort] = None,
    ):
        self._api_key_id = api_key_id
        self._api_key_secret = api_key_secret
        self.api_url = api_url
        self._session = session
        self._owns_session = session is None

    def _headers(self) -> Dict[str, str]:
        return {
            "Content-Type": FORM_CONTENT_TYPE,
            API_KEY_ID_HEADER: self._api_key_id,
            API_KEY_HEADER: self._api_key_secret,
        }

    def _get_session(self) -> HttpClientPort:
        if self._session is None:
            self._session = aiohttp.ClientSession()
        return self._session

    async def translate(self, source: str, target: str, text: str) -> str:
        """Translate ``text`` from ``source`` to ``target``.

        Raises:
            TranslationTransportError: connection failure or non-2xx status.
            TranslationDecodeError: body is not JSON or lacks the translated text.
        """
        form = {"source": source, "target": target, "text": text}
        session = self._get_session()

        try:
            async with session.post(self.api_url, data=form, headers=self._headers()) as resp:
                status = resp.status
                body = await resp.read()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise TranslationTransportError(f"Translation request failed: {e!r}") from e

        excerpt = body[:200].decode("utf-8", errors="replace")

        if not 200 <= status < 300:
            raise TranslationTransportError(f"HTTP {status}: {excerpt}")

        try:
            parsed = PapagoResponse.model_validate_json(body)
        except (ValidationError, UnicodeDecodeError) as e:
            raise TranslationDecodeError(f"Unexpected translation response: {excerpt}") from e

        return parsed.message.result.translated_text

    async def close(self) -> None:
        if self._owns_session and self._session is not None:
            await self._session.close()
            self._session = None
            _log("HTTP session closed")
