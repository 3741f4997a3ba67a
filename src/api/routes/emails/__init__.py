"""Rotas de consulta de emails capturados."""

from api.routes.emails.router import router

__all__ = ["router"]
