"""Connectors: transporte HTTP e dispatcher da API CIP.

Estrutura:
- http_base.py: cliente httpx de tentativa única (sem retry)
- cip/: dispatcher, modelo de erro e logging de requests
"""

__all__: list[str] = []
