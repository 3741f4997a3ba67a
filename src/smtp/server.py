"""
Listener SMTP da porta de captura.

Aceita conexões com `asyncio.start_server` e cria uma task por conexão,
cada uma atendida por `serve_connection`. Erros de accept são tratados
(e logados) pelo próprio asyncio sem derrubar o listener; apenas
`stop()` encerra o loop de aceitação.

Uso:
    server = SMTPCaptureServer(store, get_smtp_settings())
    await server.start()
    ...
    await server.stop()
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from config.settings import SMTPSettings
from smtp.session.connection import serve_connection
from utils.errors import CaptureListenerError

if TYPE_CHECKING:
    from types import TracebackType

    from app.protocols.message_store import MessageStoreProtocol

logger = logging.getLogger(__name__)

SHUTDOWN_GRACE_SECONDS = 5.0


class SMTPCaptureServer:
    """Servidor SMTP de captura ligado a um store.

    Args:
        store: Store compartilhado que recebe as mensagens.
        settings: Host, porta, timeout e limite de linha (defaults se None).
    """

    def __init__(
        self,
        store: MessageStoreProtocol,
        settings: SMTPSettings | None = None,
    ) -> None:
        self._store = store
        self._settings = settings or SMTPSettings()
        self._server: asyncio.Server | None = None
        self._writers: set[asyncio.StreamWriter] = set()
        self._tasks: set[asyncio.Task] = set()

    @property
    def port(self) -> int:
        """Porta efetivamente ligada (útil quando configurada como 0)."""
        if self._server is None or not self._server.sockets:
            return self._settings.port
        return self._server.sockets[0].getsockname()[1]

    @property
    def is_serving(self) -> bool:
        return self._server is not None and self._server.is_serving()

    @property
    def active_connections(self) -> int:
        return len(self._tasks)

    async def start(self) -> None:
        """Abre o listener.

        Raises:
            CaptureListenerError: Se a porta não puder ser ligada.
        """
        if self._server is not None:
            return
        try:
            self._server = await asyncio.start_server(
                self._handle_client,
                host=self._settings.host,
                port=self._settings.port,
                limit=self._settings.max_line_length,
            )
        except (OSError, OverflowError) as exc:
            raise CaptureListenerError(
                f"Não foi possível abrir a porta SMTP {self._settings.port}: {exc}"
            ) from exc

        logger.info(
            "smtp_server_listening",
            extra={"host": self._settings.host, "port": self.port},
        )

    async def stop(self) -> None:
        """Para de aceitar conexões e encerra as sessões ativas."""
        if self._server is None:
            return
        server, self._server = self._server, None
        server.close()

        for writer in list(self._writers):
            writer.close()
        if self._tasks:
            await asyncio.wait(list(self._tasks), timeout=SHUTDOWN_GRACE_SECONDS)

        await server.wait_closed()
        logger.info("smtp_server_stopped")

    async def __aenter__(self) -> SMTPCaptureServer:
        await self.start()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.stop()

    async def _handle_client(
        self,
        reader: asyncio.StreamReader,
        writer: asyncio.StreamWriter,
    ) -> None:
        task = asyncio.current_task()
        if task is not None:
            self._tasks.add(task)
        self._writers.add(writer)
        try:
            await serve_connection(
                reader,
                writer,
                self._store,
                idle_timeout=self._settings.idle_timeout,
            )
        except Exception:
            logger.exception("smtp_session_failed")
        finally:
            self._writers.discard(writer)
            if task is not None:
                self._tasks.discard(task)
