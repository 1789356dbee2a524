"""API — adapters das APIs externas.

Responsabilidades:
- Chamar a Profile API e as APIs do Pendo
- Classificar status HTTP (status_policy)
- Construir payloads para o Pendo

Subpastas:
- connectors/: clientes HTTP por serviço externo
- payload_builders/: construção de payloads para APIs externas

NÃO PODE conter: parse de eventos, orquestração de handlers.
"""
