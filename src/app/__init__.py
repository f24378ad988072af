"""App: sessão, backend simulado e composition root do cliente CIP.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- infra/mock/: backend simulado em memória (CIP_USE_MOCK=true)
- protocols/: contratos/interfaces
- sessions/: snapshot de sessão e bootstrap de autenticação
- observability/: correlation_id para logs estruturados

Padrão: app executa; api adapta; fsm governa.
"""
