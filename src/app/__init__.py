"""App — destination functions, domínio e infraestrutura.

Subpastas:
- bootstrap/: inicialização do processo (logging, validação de settings)
- use_cases/: destination functions (handlers por tipo de evento)
- domain/: modelos de evento
- infra/: cliente HTTP
- protocols/: contratos/interfaces
- observability/: correlation_id e métricas em log estruturado

Padrão: app executa; api adapta; utils apoia.
"""
