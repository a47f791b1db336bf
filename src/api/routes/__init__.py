"""Rotas HTTP da API: adapters de entrada.

Responsabilidades:
- Definir endpoints HTTP (todos, relatos, health)
- Extrair identidade do usuário dos headers do gateway
- Delegar para os use cases
- Mapear erros de domínio para status HTTP

Estrutura:
- routes/todos/: endpoints de ToDo's
- routes/relatos/: endpoints de Relatos e catálogos
- routes/health/: health checks e readiness
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
