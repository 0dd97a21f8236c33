"""Payload builders do Twitter — DMs via direct_messages/events/new."""

from .factory import build_full_payload, build_send_summary
from .quick_reply import QuickReplyPayloadBuilder
from .text import TextPayloadBuilder

__all__ = [
    "QuickReplyPayloadBuilder",
    "TextPayloadBuilder",
    "build_full_payload",
    "build_send_summary",
]
