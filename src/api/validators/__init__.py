"""Validators por provider: gates de tradução de eventos.

Estrutura:
- snapchat/: Snapchat Conversions API

Cada provider tem seus próprios validators, garantindo SRP e isolamento de falhas.
"""

__all__: list[str] = []
