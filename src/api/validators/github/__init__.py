"""Validadores do webhook GitHub do registry."""

from api.validators.github.module_name import validate_module_name

__all__ = ["validate_module_name"]
