"""Normalizers por provedor — conversão de payloads externos para modelos internos.

Estrutura:
- github/: eventos de webhook de repositórios GitHub
"""

from .github import normalize_ping_event

__all__ = ["normalize_ping_event"]
