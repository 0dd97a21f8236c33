"""Builder para quick replies (type "options")."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.connectors.twitter.models import QuickReplyOption, QuickReplyOptions

if TYPE_CHECKING:
    from app.protocols.models import OutgoingMessage


class QuickReplyPayloadBuilder:
    """Builder para message_data.quick_reply."""

    def build(self, message: OutgoingMessage) -> QuickReplyOptions | None:
        """Mapeia {title, payload} para {label, metadata}, preservando ordem.

        Lista vazia ainda gera o container; None não gera.
        """
        quick_replies = message.message.quick_replies
        if quick_replies is None:
            return None
        return QuickReplyOptions(
            options=tuple(
                QuickReplyOption(label=reply.title, metadata=reply.payload)
                for reply in quick_replies
            )
        )
