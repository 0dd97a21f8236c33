"""Builder para o texto da DM."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.protocols.models import OutgoingMessage


class TextPayloadBuilder:
    """Builder para message_data.text."""

    def build(self, message: OutgoingMessage) -> str | None:
        """Retorna o texto a enviar, ou None se vazio/ausente.

        O texto segue sem escape: o Twitter aplica o próprio escape HTML.
        """
        return message.message.text or None
