"""Configuração de logging estruturado.

Re-exporta funções e classes para configuração de logging JSON.

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização (bootstrap)
    configure_logging(level="INFO", service_name="twitter_dm_webhook")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("dm_event_received", extra={"event_count": 1})

Campos obrigatórios em todo log:
- correlation_id
- service
- level
- logger
- message
- asctime
- channel

Nunca logar texto de DM, tokens ou secrets.
"""

from config.logging.config import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    CorrelationIdFilter,
    configure_logging,
    create_json_formatter,
    get_logger,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
]
