"""Normalizers por canal — conversão de payloads externos para modelos internos.

Estrutura:
- twitter/: normalizer de DMs da Account Activity API

Cada canal tem seu próprio extractor e normalizer, mantendo SRP.
"""

from .twitter import format_update, is_own_event

__all__ = [
    "format_update",
    "is_own_event",
]
