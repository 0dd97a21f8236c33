"""Rotas HTTP da API — adapters de entrada por canal.

Responsabilidades:
- Definir endpoints HTTP (webhooks, health)
- Validação inicial de request (headers, query params)
- Delegação para connectors/coordinators
- Respostas HTTP apropriadas

Estrutura por canal:
- routes/twitter/: webhook de DMs (CRC + eventos)
- routes/health/: liveness

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
