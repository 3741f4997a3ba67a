"""Bootstrap da aplicação: inicialização e wiring.

Composition root: configura logging, valida settings e cria o store
único compartilhado entre o listener SMTP e a API de consulta.

Uso:
    from app.bootstrap import create_message_store, initialize_app

    initialize_app()
    store = create_message_store()
"""

from __future__ import annotations

import logging

from app.bootstrap.dependencies import create_message_store
from app.observability import get_session_id
from config.logging import configure_logging
from config.settings import (
    get_base_settings,
    get_http_settings,
    get_smtp_settings,
)

STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Configura logging JSON estruturado com id da sessão SMTP.

    Deve ser chamada uma vez no início do processo.
    """
    base = get_base_settings()
    configure_logging(
        level=base.log_level,
        service_name=base.service_name,
        session_id_getter=get_session_id,
    )


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.
    """
    base = get_base_settings()
    strict_mode = base.environment in STRICT_VALIDATION_ENVS
    errors: list[str] = []

    errors.extend(f"base: {error}" for error in base.validate())
    errors.extend(f"smtp: {error}" for error in get_smtp_settings().validate())
    errors.extend(f"http: {error}" for error in get_http_settings().validate())

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": base.environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if strict_mode:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")


__all__ = [
    "create_message_store",
    "initialize_app",
    "validate_runtime_settings",
]
