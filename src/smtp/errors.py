"""Erros do protocolo SMTP."""

from __future__ import annotations


class ProtocolStateError(RuntimeError):
    """Transição de estado não permitida (erro de programação, não do peer)."""


class LineTooLongError(ConnectionError):
    """Linha recebida excede o limite do leitor; a conexão é encerrada."""
