"""Socket Mode acknowledgment — implements AcknowledgerPort."""

import sys

from slack_sdk.socket_mode.response import SocketModeResponse

from transbot.ports.inbound import Envelope


def _log(msg: str):
    print(f"[slack] {msg}", file=sys.stderr)


class SocketModeAcknowledger:
    """Answers each envelope by id so Slack does not redeliver it."""

    def __init__(self, client):
        # Anything with ``send_socket_mode_response``, usually a SocketModeClient
        self._client = client

    async def ack(self, envelope: Envelope) -> None:
        if not envelope.envelope_id:
            # Lifecycle envelopes carry no request id to answer
            _log(f"nothing to acknowledge for {envelope.type} envelope")
            return
        await self._client.send_socket_mode_response(
            SocketModeResponse(envelope_id=envelope.envelope_id)
        )
