"""Payload builders por destino — construção de payloads para APIs externas.

Estrutura:
- pendo/: track (`/data/track`) e metadata de visitor/account

Builders são funções puras: sem IO, sem validação de tipo dos traits.
"""

__all__: list[str] = []
