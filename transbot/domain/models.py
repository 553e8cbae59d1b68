"""Domain data models — pure Python dataclasses."""

from dataclasses import asdict, dataclass
from typing import Dict, Optional

from transbot.ports.inbound import MentionEvent


@dataclass(frozen=True)
class TranslationRequest:
    """One translation call: ``text`` from ``source`` into ``target``."""

    source: str  # e.g. "ko"
    target: str  # e.g. "en"
    text: str


@dataclass
class TranslationResult:
    success: bool
    translated_text: Optional[str] = None
    error: Optional[str] = None


@dataclass(frozen=True)
class ReplyTarget:
    """Where a reply lands: always inside a thread."""

    channel_id: str
    thread_ts: str

    @classmethod
    def for_mention(cls, mention: MentionEvent) -> "ReplyTarget":
        # Replies thread under the conversation root, or start a thread on the mention
        return cls(channel_id=mention.channel_id, thread_ts=mention.thread_ts or mention.ts)


@dataclass
class DispatchStats:
    """Per-process counters updated by the Dispatcher."""

    received: int = 0
    acknowledged: int = 0
    skipped: int = 0
    translated: int = 0
    replied: int = 0
    translation_failures: int = 0
    reply_failures: int = 0
    ack_failures: int = 0

    def as_dict(self) -> Dict[str, int]:
        return asdict(self)
