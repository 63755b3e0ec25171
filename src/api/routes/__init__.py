"""Rotas HTTP da API — adapters de entrada por provedor.

Responsabilidades:
- Definir endpoints HTTP (webhooks, health)
- Leitura inicial do request (headers, path)
- Delegação para connectors/use_cases
- Respostas HTTP apropriadas

Estrutura:
- routes/github/: webhook do GitHub (registro de módulos)
- routes/health/: health checks e readiness

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
