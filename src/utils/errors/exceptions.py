"""Exceções de infraestrutura do mailsink."""

from __future__ import annotations


class InfrastructureError(RuntimeError):
    """Base para falhas de infraestrutura (rede, bind de portas)."""


class CaptureListenerError(InfrastructureError):
    """Falha ao abrir o listener SMTP na porta de captura."""
