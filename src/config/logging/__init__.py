"""Logging estruturado (JSON) do mailsink.

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização (bootstrap)
    configure_logging(level="INFO", service_name="mailsink")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("email_captured", extra={"message_id": "1"})

Todo registro carrega `service` e `session_id` (sessão SMTP corrente,
vazio fora de uma conexão).
"""

from config.logging.config import configure_logging, get_logger
from config.logging.filters import SessionContextFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "SessionContextFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
]
