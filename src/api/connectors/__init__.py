"""Connectors — adapters de borda para APIs externas.

Estrutura:
- profiles/: Profile API (traits de users/accounts)
- pendo/: Pendo track e metadata API
- status_policy.py: classificação de status compartilhada pelos connectors
"""

__all__: list[str] = []
