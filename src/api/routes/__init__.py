"""Rotas HTTP da API de consulta.

Estrutura:
- routes/emails/: listagem, consulta e limpeza das mensagens
- routes/health/: liveness e readiness
- routes/ui/: página inicial e arquivos estáticos
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
