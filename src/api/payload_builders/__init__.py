"""Payload builders — construção das respostas enviadas pelos webhooks.

Estrutura:
- github/: respostas do webhook de registro de módulos
"""

__all__: list[str] = []
