"""Testes para SendTwitterDirectMessageUseCase."""

from __future__ import annotations

import pytest
import tweepy

from app.bootstrap.twitter_adapters import TwitterDmAdapter
from app.protocols.models import (
    OutgoingMessage,
    OutgoingMessageContent,
    Participant,
    QuickReply,
)
from app.use_cases.twitter.send_direct_message import SendTwitterDirectMessageUseCase
from config.settings import TwitterSettings
from tests.fakes.fake_twitter import FakeDmClient, build_dm_webhook, build_send_response


@pytest.fixture
def text_message() -> OutgoingMessage:
    """Mensagem de texto simples."""
    return OutgoingMessage(
        recipient=Participant(id="123"),
        message=OutgoingMessageContent(text="Olá, tudo bem?"),
    )


class TestSendTwitterDirectMessageUseCase:
    """Formatação → envio → confirmação."""

    @pytest.mark.asyncio
    async def test_execute_returns_summary(
        self, twitter_settings: TwitterSettings, text_message: OutgoingMessage
    ) -> None:
        client = FakeDmClient(response=build_send_response(recipient_id="123", message_id="dm-42"))
        use_case = SendTwitterDirectMessageUseCase(
            adapter=TwitterDmAdapter(settings=twitter_settings, client=client)
        )

        summary = await use_case.execute(text_message)

        assert summary.recipient_id == "123"
        assert summary.message_id == "dm-42"
        assert client.sent_payloads[0]["event"]["message_create"]["message_data"] == {
            "text": "Olá, tudo bem?"
        }

    @pytest.mark.asyncio
    async def test_execute_accepts_plain_dict(self, twitter_settings: TwitterSettings) -> None:
        client = FakeDmClient()
        use_case = SendTwitterDirectMessageUseCase(
            adapter=TwitterDmAdapter(settings=twitter_settings, client=client)
        )

        await use_case.execute(
            {
                "recipient": {"id": "123"},
                "message": {"quick_replies": [{"title": "Sim", "payload": "YES"}]},
            }
        )

        message_data = client.sent_payloads[0]["event"]["message_create"]["message_data"]
        assert message_data == {
            "quick_reply": {
                "type": "options",
                "options": [{"label": "Sim", "metadata": "YES"}],
            }
        }

    @pytest.mark.asyncio
    async def test_execute_propagates_client_error_unmodified(
        self, twitter_settings: TwitterSettings, text_message: OutgoingMessage
    ) -> None:
        error = tweepy.TweepyException("rate limited")
        use_case = SendTwitterDirectMessageUseCase(
            adapter=TwitterDmAdapter(settings=twitter_settings, client=FakeDmClient(error=error))
        )

        with pytest.raises(tweepy.TweepyException) as exc_info:
            await use_case.execute(text_message)

        assert exc_info.value is error

    @pytest.mark.asyncio
    async def test_execute_with_malformed_response_raises(
        self, twitter_settings: TwitterSettings, text_message: OutgoingMessage
    ) -> None:
        use_case = SendTwitterDirectMessageUseCase(
            adapter=TwitterDmAdapter(
                settings=twitter_settings, client=FakeDmClient(response={"unexpected": True})
            )
        )

        with pytest.raises(KeyError):
            await use_case.execute(text_message)


@pytest.mark.asyncio
async def test_inbound_text_round_trips_to_reply(twitter_settings: TwitterSettings) -> None:
    client = FakeDmClient()
    adapter = TwitterDmAdapter(settings=twitter_settings, client=client)
    incoming = adapter.format_update(
        build_dm_webhook(text="Tom &amp; Jerry &lt;3 &quot;hi&quot;")
    )

    reply = OutgoingMessage(
        recipient=incoming.sender,
        message=OutgoingMessageContent(
            text=incoming.message.text,
            quick_replies=(QuickReply(title="Ok", payload="OK"),),
        ),
    )
    await SendTwitterDirectMessageUseCase(adapter=adapter).execute(reply)

    sent = client.sent_payloads[0]["event"]["message_create"]
    assert sent["target"]["recipient_id"] == "123"
    assert sent["message_data"]["text"] == 'Tom & Jerry <3 "hi"'
    assert sent["message_data"]["text"] == incoming.message.text
