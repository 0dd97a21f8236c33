"""API — camada de borda do canal Twitter.

Responsabilidades:
- Receber webhooks do Twitter (CRC e eventos de DM)
- Validar assinaturas e payloads
- Normalizar eventos para modelos internos
- Construir payloads de envio de DM

Subpastas:
- connectors/: webhook, assinatura e cliente tweepy
- normalizers/: evento de DM → IncomingMessage
- payload_builders: OutgoingMessage → payload de envio
- routes/: endpoints HTTP (webhook, health)

NÃO PODE conter: orquestração de use cases ou wiring.
"""
