"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    CaptureListenerError,
    InfrastructureError,
)

__all__ = [
    "CaptureListenerError",
    "InfrastructureError",
]
