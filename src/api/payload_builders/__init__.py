"""Payload builders por canal — construção de payloads para APIs externas.

Estrutura:
- messenger/: Messenger Send API (anexos de template)

Cada canal tem seus próprios builders, garantindo SRP e isolamento de falhas.
"""

__all__: list[str] = []
