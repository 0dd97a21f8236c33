"""Extrator de payloads de DM do Twitter (Account Activity API).

Estrutura do webhook:
- for_user_id
- direct_message_events: lista de eventos message_create

Somente o primeiro evento de cada webhook é lido.
"""

from __future__ import annotations

import logging
import math
import re
from typing import Any

from api.connectors.twitter.models import DirectMessageEvent, WebhookUpdate

logger = logging.getLogger(__name__)

# Maior timestamp representável por uma data (±8.64e15 ms)
MAX_TIMESTAMP_MS = 8_640_000_000_000_000

_LEADING_INT_RE = re.compile(r"^\s*([+-]?[0-9]+)")

# Entidades escapadas pelo Twitter em message_data.text
_HTML_ENTITIES = {
    "&amp;": "&",
    "&lt;": "<",
    "&gt;": ">",
    "&quot;": '"',
    "&#39;": "'",
}
_HTML_ENTITY_RE = re.compile("|".join(re.escape(entity) for entity in _HTML_ENTITIES))


def extract_first_event(payload: dict[str, Any]) -> DirectMessageEvent:
    """Extrai o primeiro evento de DM do payload.

    Raises:
        KeyError, IndexError, TypeError: Payload sem evento utilizável.
    """
    update = WebhookUpdate.from_dict(payload)
    if len(update.events) > 1:
        logger.warning(
            "twitter_dm_events_dropped",
            extra={"event_count": len(update.events), "dropped_events": len(update.events) - 1},
        )
    return update.first_event()


def has_direct_message_events(payload: dict[str, Any]) -> bool:
    """True se o payload traz ao menos um evento de DM."""
    return WebhookUpdate.from_dict(payload).has_events


def is_own_event(payload: dict[str, Any], owner_id: str) -> bool:
    """True se o primeiro evento foi enviado pela própria conta (eco)."""
    event = payload["direct_message_events"][0]
    return event["message_create"]["sender_id"] == owner_id


def parse_timestamp_ms(raw: Any) -> int | float:
    """Converte created_timestamp (string) em epoch ms.

    Lê sinal e dígitos iniciais em base 10, ignorando o restante.
    Sem dígitos ASCII (0-9), ou fora do intervalo de datas, retorna NaN (sem levantar).
    """
    match = _LEADING_INT_RE.match(str(raw)) if raw is not None else None
    if match is None:
        return math.nan
    value = int(match.group(1))
    if abs(value) > MAX_TIMESTAMP_MS:
        return math.nan
    return value


def unescape_text(text: str) -> str:
    """Remove o escape HTML aplicado pelo Twitter (&amp; &lt; &gt; &quot; &#39;)."""
    return _HTML_ENTITY_RE.sub(lambda match: _HTML_ENTITIES[match.group(0)], text)


def extract_text(event: DirectMessageEvent) -> str | None:
    """Texto pronto para o framework, ou None quando vazio."""
    if event.text == "":
        return None
    return unescape_text(event.text)
