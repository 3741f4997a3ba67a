"""Settings do listener SMTP (porta de captura)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_SMTP_PORT = 1025


@dataclass(frozen=True)
class SMTPSettings:
    """Configurações do listener SMTP.

    Attributes:
        host: Endereço de bind
        port: Porta de captura (0 = porta livre escolhida pelo SO)
        idle_timeout_seconds: Tempo máximo de espera por uma linha (0 = sem limite)
        max_line_length: Tamanho máximo de uma linha recebida, em bytes
    """

    host: str = "0.0.0.0"
    port: int = DEFAULT_SMTP_PORT
    idle_timeout_seconds: float = 300.0
    max_line_length: int = 65536

    @property
    def idle_timeout(self) -> float | None:
        """Timeout em segundos para `asyncio.wait_for`, ou None se desabilitado."""
        return self.idle_timeout_seconds if self.idle_timeout_seconds > 0 else None

    def validate(self) -> list[str]:
        """Valida configurações SMTP.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if not 0 <= self.port <= 65535:
            errors.append(f"SMTP_PORT fora do intervalo: {self.port}")

        if self.idle_timeout_seconds < 0:
            errors.append("SMTP_IDLE_TIMEOUT_SECONDS deve ser >= 0")

        if self.max_line_length < 1024:
            errors.append("SMTP_MAX_LINE_LENGTH deve ser >= 1024")

        return errors


def _load_smtp_from_env() -> SMTPSettings:
    """Carrega SMTPSettings de variáveis de ambiente."""
    return SMTPSettings(
        host=os.getenv("SMTP_HOST", "0.0.0.0"),
        port=int(os.getenv("SMTP_PORT", str(DEFAULT_SMTP_PORT))),
        idle_timeout_seconds=float(os.getenv("SMTP_IDLE_TIMEOUT_SECONDS", "300")),
        max_line_length=int(os.getenv("SMTP_MAX_LINE_LENGTH", "65536")),
    )


@lru_cache(maxsize=1)
def get_smtp_settings() -> SMTPSettings:
    """Retorna instância cacheada de SMTPSettings."""
    return _load_smtp_from_env()
