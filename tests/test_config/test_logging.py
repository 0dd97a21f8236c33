"""Testes abrangentes para config.logging.

Cobre: configure_logging, get_logger,
CorrelationIdFilter, create_json_formatter.
"""

from __future__ import annotations

import json
import logging

import pytest

from config.logging import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    CorrelationIdFilter,
    configure_logging,
    create_json_formatter,
    get_logger,
)
from config.logging.config import (
    DEFAULT_SERVICE_NAME,
    NOISY_LOGGERS,
    VALID_LOG_LEVELS,
)


class TestConfigureLogging:
    """Testes para configure_logging."""

    def test_configure_logging_default_level(self) -> None:
        """Configura logging com nível padrão INFO."""
        configure_logging()
        root = logging.getLogger()
        assert root.level == logging.INFO

    def test_configure_logging_debug_level(self) -> None:
        """Configura logging com nível DEBUG."""
        configure_logging(level="DEBUG")
        root = logging.getLogger()
        assert root.level == logging.DEBUG

    def test_configure_logging_warning_level(self) -> None:
        """Configura logging com nível WARNING."""
        configure_logging(level="warning")  # case insensitive
        root = logging.getLogger()
        assert root.level == logging.WARNING

    def test_configure_logging_error_level(self) -> None:
        """Configura logging com nível ERROR."""
        configure_logging(level="ERROR")
        root = logging.getLogger()
        assert root.level == logging.ERROR

    def test_configure_logging_critical_level(self) -> None:
        """Configura logging com nível CRITICAL."""
        configure_logging(level="CRITICAL")
        root = logging.getLogger()
        assert root.level == logging.CRITICAL

    def test_configure_logging_invalid_level_raises(self) -> None:
        """Nível inválido levanta ValueError."""
        with pytest.raises(ValueError, match="Nível de log inválido"):
            configure_logging(level="INVALID")

    def test_configure_logging_replaces_handlers(self) -> None:
        """Configure_logging substitui handlers existentes."""
        root = logging.getLogger()
        root.handlers = [logging.NullHandler(), logging.NullHandler()]
        configure_logging()
        assert len(root.handlers) == 1

    def test_configure_logging_with_correlation_id_getter(self) -> None:
        """Aceita correlation_id_getter customizado."""
        getter = lambda: "custom-corr-id"  # noqa: E731
        configure_logging(correlation_id_getter=getter)
        root = logging.getLogger()
        assert len(root.handlers) == 1
        # Verifica que o filter foi adicionado
        handler = root.handlers[0]
        filters = handler.filters
        assert any(isinstance(f, CorrelationIdFilter) for f in filters)

    def test_configure_logging_quiets_http_libraries(self) -> None:
        """Loggers de tweepy/oauthlib ficam em WARNING mesmo com root em DEBUG."""
        configure_logging(level="DEBUG")
        for name in NOISY_LOGGERS:
            assert logging.getLogger(name).level == logging.WARNING

    def test_configure_logging_custom_quiet_loggers(self) -> None:
        """Aceita lista própria de loggers silenciados."""
        configure_logging(level="DEBUG", quiet_loggers=("custom.http",))
        assert logging.getLogger("custom.http").level == logging.WARNING

    def test_valid_log_levels_constant(self) -> None:
        """VALID_LOG_LEVELS contém os níveis esperados."""
        assert {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"} == VALID_LOG_LEVELS

    def test_default_service_name_constant(self) -> None:
        """DEFAULT_SERVICE_NAME está definido."""
        assert DEFAULT_SERVICE_NAME == "twitter_dm_webhook"


class TestGetLogger:
    """Testes para get_logger."""

    def test_get_logger_returns_logger(self) -> None:
        """Retorna um logger para o nome especificado."""
        logger = get_logger("test.module")
        assert isinstance(logger, logging.Logger)
        assert logger.name == "test.module"

    def test_get_logger_same_name_returns_same_instance(self) -> None:
        """Mesmo nome retorna mesma instância."""
        logger1 = get_logger("same.module")
        logger2 = get_logger("same.module")
        assert logger1 is logger2


def _record(name: str = "test", msg: str = "msg", **extra: object) -> logging.LogRecord:
    record = logging.LogRecord(
        name=name,
        level=logging.INFO,
        pathname="",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestCorrelationIdFilter:
    """Testes para CorrelationIdFilter."""

    def test_filter_adds_context_fields(self) -> None:
        """Filter adiciona correlation_id do getter, service e channel padrão."""
        filter_ = CorrelationIdFilter("my_service", lambda: "corr-123")
        record = _record()

        assert filter_.filter(record) is True
        assert record.correlation_id == "corr-123"
        assert record.service == "my_service"
        assert record.channel == "twitter"

    def test_filter_preserves_explicit_correlation_id(self) -> None:
        """correlation_id passado via extra (task em background) é mantido."""
        filter_ = CorrelationIdFilter("svc", lambda: "from-context")
        record = _record(correlation_id="from-request")

        filter_.filter(record)

        assert record.correlation_id == "from-request"

    def test_filter_preserves_explicit_channel(self) -> None:
        filter_ = CorrelationIdFilter("svc", channel="twitter")
        record = _record(channel="health")

        filter_.filter(record)

        assert record.channel == "health"

    def test_filter_uses_empty_string_when_no_getter(self) -> None:
        """Sem getter e sem extra, correlation_id fica vazio."""
        filter_ = CorrelationIdFilter("service_name", None)
        record = _record()

        filter_.filter(record)

        assert record.correlation_id == ""

    def test_filter_fills_empty_explicit_correlation_id(self) -> None:
        """extra com correlation_id vazio não bloqueia o valor do contexto."""
        filter_ = CorrelationIdFilter("svc", lambda: "ctx-1")
        record = _record(correlation_id="")

        filter_.filter(record)

        assert record.correlation_id == "ctx-1"


class TestCreateJsonFormatter:
    """Testes para create_json_formatter e constantes."""

    def test_required_log_fields_order(self) -> None:
        """Campos do JSON em ordem fixa, incluindo channel."""
        assert REQUIRED_LOG_FIELDS == (
            "asctime",
            "levelname",
            "name",
            "message",
            "correlation_id",
            "service",
            "channel",
        )

    def test_field_rename_map_content(self) -> None:
        """FIELD_RENAME_MAP mapeia campos corretamente."""
        assert FIELD_RENAME_MAP == {"levelname": "level", "name": "logger"}

    def test_create_json_formatter_returns_formatter(self) -> None:
        """create_json_formatter retorna JsonFormatter."""
        from pythonjsonlogger.json import JsonFormatter

        assert isinstance(create_json_formatter(), JsonFormatter)

    def test_json_formatter_outputs_renamed_context_fields(self) -> None:
        """Record filtrado vira JSON com level/logger renomeados e contexto."""
        record = _record(name="api.routes.twitter.webhook", msg="webhook_verified")
        CorrelationIdFilter("twitter_dm_webhook", lambda: "abc-123").filter(record)

        output = json.loads(create_json_formatter().format(record))

        assert output["message"] == "webhook_verified"
        assert output["level"] == "INFO"
        assert output["logger"] == "api.routes.twitter.webhook"
        assert output["correlation_id"] == "abc-123"
        assert output["service"] == "twitter_dm_webhook"
        assert output["channel"] == "twitter"
        assert "levelname" not in output


class TestLoggingIntegration:
    """Testes de integração do sistema de logging."""

    def test_full_logging_flow(self) -> None:
        """Fluxo completo: configure, get_logger, log."""
        configure_logging(
            level="DEBUG",
            service_name="integration_test",
            correlation_id_getter=lambda: "int-test-001",
        )
        logger = get_logger("integration.test")
        # Não deve levantar exceção
        logger.debug("Debug message", extra={"custom_field": "value"})
        logger.info("Info message")
        logger.warning("Warning message")
        logger.error("Error message")

    def test_logger_with_extra_fields(self) -> None:
        """Logger aceita extra fields customizados."""
        configure_logging(level="INFO", service_name="extra_test")
        logger = get_logger("extra.fields")
        # Não deve levantar exceção
        logger.info(
            "With extras",
            extra={
                "latency_ms": 42,
                "event_type": "test",
                "mid": "m1",
            },
        )
