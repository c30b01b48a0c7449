"""API — camada de borda e adapters de canais.

Responsabilidades:
- Chamar APIs externas (Graph API do Messenger)
- Validar inputs antes de qualquer IO
- Construir payloads para APIs externas
- Interpretar respostas e erros das APIs

Subpastas:
- connectors/: adapters HTTP por canal
- payload_builders/: construção de payloads para APIs externas

NÃO PODE conter: servidor HTTP, webhooks, estado persistente, retries.
"""
