"""Protocolos e contratos do core da aplicação."""

from .dm_client import TwitterDmClientProtocol
from .error_reporter import ErrorReporterProtocol
from .message_adapter import MessageAdapterProtocol
from .message_sink import IncomingMessageSinkProtocol
from .models import (
    IncomingMessage,
    IncomingMessageContent,
    OutgoingMessage,
    OutgoingMessageContent,
    Participant,
    QuickReply,
    SendSummary,
)
from .normalizer import MessageNormalizerProtocol
from .outbound_sender import OutboundSenderProtocol
from .payload_builder import PayloadBuilderProtocol

__all__ = [
    "ErrorReporterProtocol",
    "IncomingMessage",
    "IncomingMessageContent",
    "IncomingMessageSinkProtocol",
    "MessageAdapterProtocol",
    "MessageNormalizerProtocol",
    "OutboundSenderProtocol",
    "OutgoingMessage",
    "OutgoingMessageContent",
    "Participant",
    "PayloadBuilderProtocol",
    "QuickReply",
    "SendSummary",
    "TwitterDmClientProtocol",
]
