"""Exceções de domínio compartilhadas entre camadas."""

from __future__ import annotations


class InboundTranslationError(RuntimeError):
    """Falha ao traduzir evento do provedor para o formato normalizado.

    O erro original fica em `original`; quem levanta encadeia com
    `raise ... from original`.
    """

    def __init__(self, step: str, original: Exception) -> None:
        super().__init__(f'Error in {step} "{original}". Please report this.')
        self.step = step
        self.original = original


class ConfigurationError(RuntimeError):
    """Configuração obrigatória ausente ou inválida no startup."""
