"""Connectors por canal — adapters de borda para APIs externas.

Estrutura:
- messenger/: Facebook Messenger Platform via Graph API

Cada canal tem seu próprio connector, garantindo SRP e isolamento de falhas.
"""

__all__: list[str] = []
