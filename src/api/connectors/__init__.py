"""Connectors por canal — adapters de borda para APIs externas.

Estrutura:
- twitter/: Account Activity API (webhook de DMs + envio)

Cada canal tem seu próprio connector, garantindo SRP e isolamento de falhas.
"""

__all__: list[str] = []
