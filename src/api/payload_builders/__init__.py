"""Payload builders por canal — construção de payloads para APIs externas.

Estrutura:
- twitter/: Twitter Account Activity API (DMs com texto e quick replies)

Cada canal tem seus próprios builders, garantindo SRP e isolamento de falhas.
"""

__all__: list[str] = []
