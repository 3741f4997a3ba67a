"""Entrypoint do mailsink.

Expõe a aplicação ASGI (FastAPI) da API de consulta e, no lifespan,
sobe o listener SMTP de captura com o mesmo store.

Uso (desenvolvimento):
    mailsink --smtp 1025 --http 8025

Uso (uvicorn direto, portas via env SMTP_PORT/HTTP_PORT):
    uvicorn app.app:app --host 0.0.0.0 --port 8025
"""

from __future__ import annotations

import argparse
import dataclasses
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI

from api.routes import create_api_router
from api.routes.ui.router import create_static_files
from app.bootstrap import create_message_store, initialize_app, validate_runtime_settings
from config.logging import get_logger
from config.settings import (
    DEFAULT_HTTP_PORT,
    DEFAULT_SMTP_PORT,
    SMTPSettings,
    get_http_settings,
    get_smtp_settings,
)
from smtp.server import SMTPCaptureServer

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Sequence

    from app.protocols.message_store import MessageStoreProtocol

# Inicializar logging ANTES de qualquer log
initialize_app()

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Gerencia ciclo de vida da aplicação.

    Startup:
    - Valida configurações
    - Abre o listener SMTP (se configurado)

    Shutdown:
    - Fecha o listener e as sessões SMTP ativas
    """
    logger.info("app_starting", extra={"service": "mailsink"})
    validate_runtime_settings()

    smtp_server: SMTPCaptureServer | None = app.state.smtp_server
    if smtp_server is not None:
        await smtp_server.start()

    yield

    logger.info("app_shutting_down", extra={"service": "mailsink"})
    if smtp_server is not None:
        await smtp_server.stop()


def create_app(
    store: MessageStoreProtocol | None = None,
    smtp_settings: SMTPSettings | None = None,
    *,
    enable_smtp: bool = True,
) -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Args:
        store: Store compartilhado; criado via bootstrap se None.
        smtp_settings: Settings do listener; lidas do ambiente se None.
        enable_smtp: Se False, sobe apenas a API (útil em testes).

    Returns:
        Aplicação FastAPI configurada.
    """
    fastapi_app = FastAPI(
        title="mailsink",
        description="Captura de emails para desenvolvimento",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url=None,
    )

    message_store = store if store is not None else create_message_store()
    fastapi_app.state.message_store = message_store
    fastapi_app.state.smtp_server = (
        SMTPCaptureServer(message_store, smtp_settings or get_smtp_settings())
        if enable_smtp
        else None
    )

    fastapi_app.include_router(create_api_router())
    fastapi_app.mount("/static", create_static_files(), name="static")

    logger.info("app_configured", extra={"service": "mailsink", "smtp_enabled": enable_smtp})

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    smtp_default = get_smtp_settings().port
    http_default = get_http_settings().port
    parser = argparse.ArgumentParser(description="Servidor SMTP de captura com API de consulta.")
    parser.add_argument(
        "--smtp",
        type=int,
        default=smtp_default,
        help=f"Porta SMTP de captura (padrão {DEFAULT_SMTP_PORT}).",
    )
    parser.add_argument(
        "--http",
        type=int,
        default=http_default,
        help=f"Porta da API/interface web (padrão {DEFAULT_HTTP_PORT}).",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> None:
    """Entrypoint de linha de comando."""
    import uvicorn

    args = parse_args(argv)
    smtp_settings = dataclasses.replace(get_smtp_settings(), port=args.smtp)
    http_settings = dataclasses.replace(get_http_settings(), port=args.http)

    errors = [*smtp_settings.validate(), *http_settings.validate()]
    if errors:
        logger.error("cli_settings_invalid", extra={"errors": errors})
        raise SystemExit("Configuração inválida:\n" + "\n".join(f"- {e}" for e in errors))

    logger.info(
        "mailsink_starting",
        extra={"smtp_port": smtp_settings.port, "http_port": http_settings.port},
    )
    uvicorn.run(
        create_app(smtp_settings=smtp_settings),
        host=http_settings.host,
        port=http_settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
