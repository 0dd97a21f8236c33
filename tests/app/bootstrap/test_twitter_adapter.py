"""Testes do wiring do adapter Twitter e da validação de startup."""

from __future__ import annotations

import logging

import pytest

from app.bootstrap import validate_runtime_settings
from app.bootstrap.twitter_adapters import (
    LoggingErrorReporter,
    LoggingMessageSink,
    TwitterDmAdapter,
)
from app.bootstrap.twitter_factory import (
    create_send_direct_message_use_case,
    create_twitter_dm_adapter,
)
from app.protocols import MessageAdapterProtocol
from config.settings import TwitterSettings, get_base_settings, get_twitter_settings
from tests.fakes.fake_twitter import FakeDmClient, build_dm_webhook
from utils.errors import ConfigurationError, InboundTranslationError


@pytest.fixture
def adapter(twitter_settings: TwitterSettings) -> TwitterDmAdapter:
    return create_twitter_dm_adapter(settings=twitter_settings, client=FakeDmClient())


class TestTwitterDmAdapterDescriptor:
    def test_static_metadata(self, adapter: TwitterDmAdapter) -> None:
        assert MessageAdapterProtocol in type(adapter).__mro__
        assert adapter.type == "twitter-dm"
        assert adapter.requires_webhook is True
        assert adapter.retrieves_user_info is False
        assert adapter.required_credentials == (
            "consumer_key",
            "consumer_secret",
            "access_token",
            "access_token_secret",
            "owner_id",
        )

    def test_capabilities(self, adapter: TwitterDmAdapter) -> None:
        assert adapter.receives["text"] is True
        assert adapter.receives["echo"] is False
        assert not any(adapter.receives["attachment"].values())
        assert adapter.sends["text"] is True
        assert adapter.sends["quick_reply"] is True
        assert not any(adapter.sends["sender_action"].values())

    def test_capabilities_are_read_only(self, adapter: TwitterDmAdapter) -> None:
        with pytest.raises(TypeError):
            adapter.sends["text"] = False  # type: ignore[index]

    def test_bot_id_comes_from_access_token(self, adapter: TwitterDmAdapter) -> None:
        assert adapter.bot_id == "999"
        assert adapter.owner_id == "999"


class TestTwitterDmAdapterBehavior:
    def test_crc_response_token_uses_consumer_secret(self, adapter: TwitterDmAdapter) -> None:
        assert adapter.crc_response_token("abc").startswith("sha256=")
        assert adapter.crc_response_token("abc") == adapter.crc_response_token("abc")

    def test_is_own_update(self, adapter: TwitterDmAdapter) -> None:
        assert adapter.is_own_update(build_dm_webhook(sender_id="999")) is True
        assert adapter.is_own_update(build_dm_webhook(sender_id="123")) is False

    @pytest.mark.asyncio
    async def test_send_message_delegates_to_client(self, twitter_settings: TwitterSettings) -> None:
        client = FakeDmClient()
        adapter = TwitterDmAdapter(settings=twitter_settings, client=client)

        response = await adapter.send_message({"event": {}})

        assert client.sent_payloads == [{"event": {}}]
        assert response["event"]["id"] == "dm-1"

    def test_use_case_factory_reuses_adapter(self, adapter: TwitterDmAdapter) -> None:
        use_case = create_send_direct_message_use_case(adapter=adapter)

        assert use_case._adapter is adapter


class TestDefaultCollaborators:
    @pytest.mark.asyncio
    async def test_logging_sink_does_not_log_text(
        self, adapter: TwitterDmAdapter, caplog: pytest.LogCaptureFixture
    ) -> None:
        message = adapter.format_update(build_dm_webhook(text="segredo"))

        with caplog.at_level(logging.INFO):
            await LoggingMessageSink().emit(message)

        assert "twitter_dm_update_emitted" in caplog.text
        assert "segredo" not in caplog.text

    def test_logging_reporter_logs_error(self, caplog: pytest.LogCaptureFixture) -> None:
        error = InboundTranslationError("format_update", KeyError("message_create"))

        with caplog.at_level(logging.ERROR):
            LoggingErrorReporter().report(error)

        assert "twitter_dm_update_error" in caplog.text
        assert caplog.records[-1].error_type == "InboundTranslationError"


class TestValidateRuntimeSettings:
    @pytest.fixture(autouse=True)
    def _clean_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in (
            "TWITTER_CONSUMER_KEY",
            "TWITTER_CONSUMER_SECRET",
            "TWITTER_ACCESS_TOKEN",
            "TWITTER_ACCESS_TOKEN_SECRET",
            "TWITTER_OWNER_ID",
            "TWITTER_WEBHOOK_PROCESSING_MODE",
            "SERVICE_NAME",
        ):
            monkeypatch.delenv(name, raising=False)
        get_base_settings.cache_clear()
        get_twitter_settings.cache_clear()
        yield
        get_base_settings.cache_clear()
        get_twitter_settings.cache_clear()

    def test_production_without_credentials_fails(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "production")

        with pytest.raises(ConfigurationError, match="TWITTER_CONSUMER_SECRET"):
            validate_runtime_settings()

    def test_development_without_credentials_only_warns(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        monkeypatch.setenv("ENVIRONMENT", "development")

        with caplog.at_level(logging.WARNING):
            validate_runtime_settings()

        assert "settings_validation_failed" in caplog.text

    def test_production_with_credentials_passes(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("TWITTER_CONSUMER_KEY", "ck")
        monkeypatch.setenv("TWITTER_CONSUMER_SECRET", "cs")
        monkeypatch.setenv("TWITTER_ACCESS_TOKEN", "1-t")
        monkeypatch.setenv("TWITTER_ACCESS_TOKEN_SECRET", "ats")
        monkeypatch.setenv("TWITTER_OWNER_ID", "1")

        validate_runtime_settings()
