"""Validators por provedor — validação de entradas recebidas nos webhooks.

Estrutura:
- github/: nome do módulo no path do webhook GitHub
"""

from api.validators.github import validate_module_name

__all__ = ["validate_module_name"]
