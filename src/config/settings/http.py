"""Settings da API HTTP de consulta."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_HTTP_PORT = 8025


@dataclass(frozen=True)
class HTTPSettings:
    """Configurações da API de consulta e da interface web.

    Attributes:
        host: Endereço de bind do uvicorn
        port: Porta HTTP
    """

    host: str = "0.0.0.0"
    port: int = DEFAULT_HTTP_PORT

    def validate(self) -> list[str]:
        errors: list[str] = []
        if not 1 <= self.port <= 65535:
            errors.append(f"HTTP_PORT fora do intervalo: {self.port}")
        return errors


def _load_http_from_env() -> HTTPSettings:
    """Carrega HTTPSettings de variáveis de ambiente."""
    return HTTPSettings(
        host=os.getenv("HTTP_HOST", "0.0.0.0"),
        port=int(os.getenv("HTTP_PORT", str(DEFAULT_HTTP_PORT))),
    )


@lru_cache(maxsize=1)
def get_http_settings() -> HTTPSettings:
    """Retorna instância cacheada de HTTPSettings."""
    return _load_http_from_env()
