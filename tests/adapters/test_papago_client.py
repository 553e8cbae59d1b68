"""Unit tests for PapagoClient."""

import asyncio
import json
from unittest.mock import patch

import aiohttp
import pytest

from transbot.adapters.papago.client import (
    API_KEY_HEADER,
    API_KEY_ID_HEADER,
    FORM_CONTENT_TYPE,
    PapagoClient,
    PapagoResponse,
)
from transbot.config import PAPAGO_TRANSLATION_URL
from transbot.errors import TranslationDecodeError, TranslationError, TranslationTransportError


def _papago_body(text):
    return json.dumps({
        "message": {
            "@type": "response",
            "@service": "naverservice.nmt.proxy",
            "@version": "1.0.0",
            "result": {"srcLangType": "ko", "tarLangType": "en", "translatedText": text},
        }
    })


def _fake_session(status=200, body="", error=None):
    """Return a stand-in for aiohttp.ClientSession recording each post() call."""

    class FakeResponse:
        def __init__(self):
            self.status = status

        async def read(self):
            return body if isinstance(body, bytes) else body.encode("utf-8")

        async def __aenter__(self):
            return self

        async def __aexit__(self, *args):
            pass

    class FakeSession:
        def __init__(self):
            self.calls = []
            self.closed = False

        def post(self, url, **kwargs):
            self.calls.append({"url": url, **kwargs})
            if error is not None:
                raise error
            return FakeResponse()

        async def close(self):
            self.closed = True

    return FakeSession()


class TestTranslate:
    @pytest.mark.asyncio
    async def test_success(self):
        session = _fake_session(body=_papago_body("Hello"))
        client = PapagoClient("key-id", "key-secret", session=session)

        result = await client.translate("ko", "en", "안녕하세요")

        assert result == "Hello"
        assert len(session.calls) == 1

    @pytest.mark.asyncio
    async def test_request_shape(self):
        session = _fake_session(body=_papago_body("안녕하세요"))
        client = PapagoClient("key-id", "key-secret", session=session)

        await client.translate("en", "ko", "Hello")

        call = session.calls[0]
        assert call["url"] == PAPAGO_TRANSLATION_URL
        assert call["data"] == {"source": "en", "target": "ko", "text": "Hello"}
        assert call["headers"]["Content-Type"] == FORM_CONTENT_TYPE
        assert call["headers"][API_KEY_ID_HEADER] == "key-id"
        assert call["headers"][API_KEY_HEADER] == "key-secret"

    @pytest.mark.asyncio
    async def test_custom_url(self):
        session = _fake_session(body=_papago_body("Hi"))
        client = PapagoClient("id", "secret", api_url="http://localhost:9000/translation", session=session)

        await client.translate("ko", "en", "안녕")

        assert session.calls[0]["url"] == "http://localhost:9000/translation"

    @pytest.mark.asyncio
    async def test_non_2xx_is_transport_error(self):
        body = json.dumps({"errorMessage": "Authentication Failed", "errorCode": "200"})
        client = PapagoClient("id", "secret", session=_fake_session(status=401, body=body))

        with pytest.raises(TranslationTransportError) as exc:
            await client.translate("ko", "en", "안녕")
        assert "401" in str(exc.value)
        assert "Authentication Failed" in str(exc.value)

    @pytest.mark.asyncio
    async def test_connection_error_is_transport_error(self):
        session = _fake_session(error=aiohttp.ClientConnectionError("refused"))
        client = PapagoClient("id", "secret", session=session)

        with pytest.raises(TranslationTransportError):
            await client.translate("ko", "en", "안녕")
        assert len(session.calls) == 1

    @pytest.mark.asyncio
    async def test_timeout_is_transport_error(self):
        client = PapagoClient("id", "secret", session=_fake_session(error=asyncio.TimeoutError()))

        with pytest.raises(TranslationTransportError):
            await client.translate("ko", "en", "안녕")

    @pytest.mark.asyncio
    async def test_malformed_json_is_decode_error(self):
        client = PapagoClient("id", "secret", session=_fake_session(body="<html>oops</html>"))

        with pytest.raises(TranslationDecodeError):
            await client.translate("ko", "en", "안녕")

    @pytest.mark.asyncio
    async def test_missing_field_is_decode_error(self):
        body = json.dumps({"message": {"result": {"srcLangType": "ko"}}})
        client = PapagoClient("id", "secret", session=_fake_session(body=body))

        with pytest.raises(TranslationDecodeError):
            await client.translate("ko", "en", "안녕")

    @pytest.mark.asyncio
    async def test_invalid_utf8_body_is_decode_error(self):
        body = b'{"message":{"result":{"translatedText":"\xff\xfe"}}}'
        client = PapagoClient("id", "secret", session=_fake_session(body=body))

        with pytest.raises(TranslationDecodeError):
            await client.translate("ko", "en", "안녕")

    @pytest.mark.asyncio
    async def test_invalid_utf8_error_body_is_transport_error(self):
        client = PapagoClient("id", "secret", session=_fake_session(status=502, body=b"\xff\xfe gateway"))

        with pytest.raises(TranslationTransportError) as exc:
            await client.translate("ko", "en", "안녕")
        assert "502" in str(exc.value)

    @pytest.mark.asyncio
    async def test_errors_share_base_class(self):
        client = PapagoClient("id", "secret", session=_fake_session(body="{}"))

        with pytest.raises(TranslationError):
            await client.translate("ko", "en", "안녕")


class TestSessionLifecycle:
    @pytest.mark.asyncio
    async def test_owned_session_created_and_closed(self):
        session = _fake_session(body=_papago_body("Hello"))
        client = PapagoClient("id", "secret")
        with patch("transbot.adapters.papago.client.aiohttp.ClientSession", return_value=session):
            assert await client.translate("ko", "en", "안녕") == "Hello"
        await client.close()
        assert session.closed is True

    @pytest.mark.asyncio
    async def test_injected_session_left_open(self):
        session = _fake_session(body=_papago_body("Hello"))
        client = PapagoClient("id", "secret", session=session)
        await client.translate("ko", "en", "안녕")
        await client.close()
        assert session.closed is False


class TestPapagoResponse:
    def test_parses_nested_text(self):
        parsed = PapagoResponse.model_validate_json(_papago_body("Hello"))
        assert parsed.message.result.translated_text == "Hello"
