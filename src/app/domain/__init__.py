"""Entidades de domínio."""

from app.domain.message import Message

__all__ = ["Message"]
