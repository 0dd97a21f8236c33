"""Logging estruturado JSON do webhook de DMs.

Cada record sai com: asctime, level, logger, message, correlation_id,
service e channel. O correlation_id vem do contexto da requisição de
webhook; `channel` identifica o canal quando o chamador não informa.

Bibliotecas HTTP/OAuth (tweepy, oauthlib, urllib3) ficam contidas em
WARNING: em DEBUG elas logam headers Authorization assinados.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pythonjsonlogger.json import JsonFormatter

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "twitter_dm_webhook"
DEFAULT_CHANNEL = "twitter"

# Bibliotecas que logam requests assinados em DEBUG
NOISY_LOGGERS: tuple[str, ...] = ("tweepy", "requests_oauthlib", "oauthlib", "urllib3")

# Ordem fixa dos campos no JSON
REQUIRED_LOG_FIELDS: tuple[str, ...] = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
    "channel",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


class CorrelationIdFilter(logging.Filter):
    """Completa o record com correlation_id, service e channel.

    Valores passados via `extra` têm precedência (processamento em
    background informa o correlation_id da requisição original).
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
        channel: str = DEFAULT_CHANNEL,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._channel = channel
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "correlation_id", None):
            record.correlation_id = self._get_correlation_id()
        if not getattr(record, "channel", None):
            record.channel = self._channel
        record.service = self._service_name
        return True


def create_json_formatter() -> JsonFormatter:
    """Formatter JSON com os campos de REQUIRED_LOG_FIELDS renomeados.

    Exemplo:
        {"asctime": "...", "level": "INFO", "logger": "api.routes.twitter.webhook",
         "message": "webhook_verified", "correlation_id": "abc-123",
         "service": "twitter_dm_webhook", "channel": "twitter"}
    """
    return JsonFormatter(
        " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS),
        rename_fields=FIELD_RENAME_MAP,
    )


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
    quiet_loggers: Iterable[str] = NOISY_LOGGERS,
) -> None:
    """Configura o handler JSON único do root logger.

    Chamada uma vez pelo bootstrap (app/bootstrap/).

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do serviço nos logs.
        correlation_id_getter: Retorna o correlation_id do contexto atual.
        quiet_loggers: Loggers de terceiros fixados em WARNING.

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))

    root = logging.getLogger()
    root.setLevel(level_upper)
    # Substitui handlers existentes para evitar duplicação
    root.handlers = [handler]

    for name in quiet_loggers:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Logger do módulo; o filter do handler injeta os campos de contexto."""
    return logging.getLogger(name)
