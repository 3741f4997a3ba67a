"""Agregador de settings do mailsink.

Re-exporta todas as settings e funções de cada módulo.
"""

from __future__ import annotations

from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.http import (
    DEFAULT_HTTP_PORT,
    HTTPSettings,
    get_http_settings,
)
from config.settings.smtp import (
    DEFAULT_SMTP_PORT,
    SMTPSettings,
    get_smtp_settings,
)

__all__ = [
    "DEFAULT_HTTP_PORT",
    "DEFAULT_SMTP_PORT",
    "BaseSettings",
    "Environment",
    "HTTPSettings",
    "SMTPSettings",
    "get_base_settings",
    "get_http_settings",
    "get_smtp_settings",
]
