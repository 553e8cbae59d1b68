"""Dispatcher — the single consumer loop between the gateway and the translator.

Each envelope taken from the source is decoded, routed to the translator in
the direction its language calls for, answered in a thread, and then
acknowledged. Acknowledgment happens exactly once per envelope, in one
place, whatever happened before it.
"""

import sys
from typing import Callable, Optional

from transbot.domain.events import decode_mention, strip_mentions
from transbot.domain.language import Language, detect_language
from transbot.domain.models import DispatchStats, ReplyTarget, TranslationRequest, TranslationResult
from transbot.errors import TranslationError
from transbot.ports.inbound import AcknowledgerPort, Envelope, EnvelopeSourcePort
from transbot.ports.outbound import ResponderPort, TranslatorPort


def _log(msg: str):
    print(f"[dispatcher] {msg}", file=sys.stderr)


class Dispatcher:
    """Processes envelopes strictly in arrival order, one at a time."""

    def __init__(
        self,
        source: EnvelopeSourcePort,
        acknowledger: AcknowledgerPort,
        translator: TranslatorPort,
        responder: ResponderPort,
        bot_user_id: Optional[str] = None,
        detector: Callable[[str], Language] = detect_language,
    ):
        self._source = source
        self._acknowledger = acknowledger
        self._translator = translator
        self._responder = responder
        self._detect = detector
        self.bot_user_id = bot_user_id
        self.stats = DispatchStats()

    async def run(self) -> None:
        """Consume envelopes until the source reports it is closed."""
        _log("started")
        while True:
            envelope = await self._source.receive_envelope()
            if envelope is None:
                break
            await self.process(envelope)
        _log(f"event stream closed, stopping ({self.stats.received} envelopes handled)")

    async def process(self, envelope: Envelope) -> None:
        """Handle one envelope to completion, then acknowledge it."""
        self.stats.received += 1
        try:
            await self._handle(envelope)
        except Exception as e:
            _log(f"error handling envelope {envelope.envelope_id}: {e!r}")
        finally:
            await self._acknowledge(envelope)

    async def _handle(self, envelope: Envelope) -> None:
        mention = decode_mention(envelope, self.bot_user_id)
        if mention is None or mention.author_is_bot:
            self.stats.skipped += 1
            return

        text = strip_mentions(mention.text)
        if not text:
            self.stats.skipped += 1
            return

        source = self._detect(text)
        request = TranslationRequest(
            source=source.value,
            target=source.opposite().value,
            text=text,
        )
        result = await self._translate(request)
        self._logline(mention.channel_id, request, result)

        if not result.success:
            self.stats.translation_failures += 1
            return
        self.stats.translated += 1

        target = ReplyTarget.for_mention(mention)
        posted = await self._responder.reply(target.channel_id, result.translated_text, target.thread_ts)
        if posted.success:
            self.stats.replied += 1
        else:
            self.stats.reply_failures += 1

    async def _translate(self, request: TranslationRequest) -> TranslationResult:
        try:
            translated = await self._translator.translate(request.source, request.target, request.text)
        except TranslationError as e:
            return TranslationResult(success=False, error=str(e))
        return TranslationResult(success=True, translated_text=translated)

    async def _acknowledge(self, envelope: Envelope) -> None:
        try:
            await self._acknowledger.ack(envelope)
        except Exception as e:
            self.stats.ack_failures += 1
            _log(f"ack failed for envelope {envelope.envelope_id}: {e!r}")
            return
        self.stats.acknowledged += 1

    def _logline(self, channel_id: str, request: TranslationRequest, result: TranslationResult):
        msg = result.translated_text or ""
        _log(
            "processed message "
            f"channel={channel_id} from={request.source} to={request.target} "
            f"msg={msg!r} msg_length={len(msg)} error={result.error}"
        )
