"""App — orquestração, casos de uso e wiring do adapter de DMs.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- coordinators/: fluxo inbound (filtro → tradução → emissão)
- use_cases/: casos de uso outbound
- protocols/: contratos/interfaces e modelos normalizados
- observability/: correlation_id para logs estruturados
"""
