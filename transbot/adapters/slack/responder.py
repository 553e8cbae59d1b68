"""Slack replies — chat.postMessage into the mention's thread."""

import asyncio
import sys
from typing import Any, Dict, Optional

import aiohttp
from slack_sdk.errors import SlackApiError
from slack_sdk.web.async_client import AsyncWebClient

from transbot.ports.outbound import ChatPort, PostResult


def _log(msg: str):
    print(f"[slack] {msg}", file=sys.stderr)


class SlackChat:
    """ChatPort implementation using slack_sdk's AsyncWebClient."""

    def __init__(self, web_client: AsyncWebClient):
        self._web = web_client

    async def post_message(
        self,
        channel_id: str,
        text: str,
        thread_ts: Optional[str] = None,
    ) -> Dict[str, Any]:
        response = await self._web.chat_postMessage(
            channel=channel_id,
            text=text,
            thread_ts=thread_ts,
        )
        return response.data

    async def bot_user_id(self) -> Optional[str]:
        """The bot's own user id, as reported by auth.test."""
        response = await self._web.auth_test()
        return response.get("user_id")


class SlackResponder:
    """Posts translated text as a threaded reply. Failures are reported, never retried."""

    def __init__(self, chat: ChatPort):
        self._chat = chat

    async def reply(self, channel_id: str, text: str, thread_ts: str) -> PostResult:
        try:
            data = await self._chat.post_message(channel_id, text, thread_ts=thread_ts)
        except SlackApiError as e:
            error = e.response.get("error") if e.response is not None else None
            _log(f"reply to {channel_id}/{thread_ts} rejected: {error or e}")
            return PostResult(success=False, channel_id=channel_id, error=error or str(e))
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            _log(f"reply to {channel_id}/{thread_ts} failed: {e!r}")
            return PostResult(success=False, channel_id=channel_id, error=repr(e))

        return PostResult(success=True, channel_id=channel_id, ts=(data or {}).get("ts"))
