"""Payload builders por provider: construção de payloads para APIs externas.

Estrutura:
- snapchat/: Snapchat Conversions API v3

Cada provider tem seus próprios builders, garantindo SRP e isolamento de falhas.
"""

__all__: list[str] = []
