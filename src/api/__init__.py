"""API: camada de acesso à API CIP.

Responsabilidades:
- Despachar todas as chamadas de saída por um único ponto (dispatcher)
- Alternar entre rede (httpx) e backend simulado
- Traduzir respostas de erro em ApiClientError
- Expor facades finas por família de recurso

Subpastas:
- connectors/: transporte HTTP e dispatcher da API CIP
- endpoints/: facades por recurso (uma chamada de dispatch por operação)
- models/: contratos tipados (records pass-through e DTOs de escrita)

NÃO PODE conter: estado de sessão, FSM, fixtures do backend simulado.
"""
