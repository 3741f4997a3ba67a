"""Filter que injeta `service` e `session_id` em cada registro de log."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


class SessionContextFilter(logging.Filter):
    """Enriquece registros com o serviço e a sessão SMTP corrente.

    Nunca filtra: sempre retorna True.
    """

    def __init__(
        self,
        service_name: str,
        session_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_session_id = session_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        # Preserva session_id passado explicitamente via `extra`
        existing = getattr(record, "session_id", None)
        record.session_id = existing if existing else self._get_session_id()
        record.service = self._service_name
        return True
