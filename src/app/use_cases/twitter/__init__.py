"""Use cases do canal Twitter."""

from .send_direct_message import SendTwitterDirectMessageUseCase

__all__ = ["SendTwitterDirectMessageUseCase"]
