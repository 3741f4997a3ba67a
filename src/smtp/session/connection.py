"""
Driver asyncio de uma conexão SMTP.

Lê linhas do StreamReader, entrega cada uma à `SMTPSession` e escreve
as respostas. Qualquer falha de transporte, EOF ou timeout de leitura
encerra a conexão em silêncio; a transação pendente é descartada.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
from typing import TYPE_CHECKING

from app.observability import reset_session_id, set_session_id
from smtp.errors import LineTooLongError
from smtp.session.handler import SMTPSession

if TYPE_CHECKING:
    from app.protocols.message_store import MessageStoreProtocol

logger = logging.getLogger(__name__)

ENCODING = "utf-8"


def decode_line(raw: bytes) -> str:
    """Remove o terminador (LF ou CRLF) e decodifica a linha."""
    if raw.endswith(b"\n"):
        raw = raw[:-1]
    if raw.endswith(b"\r"):
        raw = raw[:-1]
    return raw.decode(ENCODING, errors="replace")


async def _read_line(reader: asyncio.StreamReader, timeout: float | None) -> bytes:
    try:
        return await asyncio.wait_for(reader.readline(), timeout)
    except ValueError as exc:
        # StreamReader converte LimitOverrunError em ValueError
        raise LineTooLongError(str(exc)) from exc


async def _send(writer: asyncio.StreamWriter, reply: str) -> None:
    writer.write(reply.encode(ENCODING))
    await writer.drain()


async def serve_connection(
    reader: asyncio.StreamReader,
    writer: asyncio.StreamWriter,
    store: MessageStoreProtocol,
    *,
    idle_timeout: float | None = None,
) -> SMTPSession:
    """Atende uma conexão até QUIT, EOF, erro de transporte ou timeout.

    Args:
        reader: Stream de entrada da conexão.
        writer: Stream de saída da conexão (fechado ao final).
        store: Store compartilhado que recebe as mensagens.
        idle_timeout: Segundos máximos de espera por cada linha (None = sem limite).

    Returns:
        A sessão encerrada (útil para inspeção em testes).
    """
    token = set_session_id()
    session = SMTPSession(store)
    peer = writer.get_extra_info("peername")
    logger.info("smtp_connection_opened", extra={"peer": str(peer)})

    trigger = "eof"
    try:
        await _send(writer, session.greeting())
        while True:
            raw = await _read_line(reader, idle_timeout)
            if not raw:
                break
            response = session.handle_line(decode_line(raw))
            if response.reply is not None:
                await _send(writer, response.reply)
            if response.close:
                trigger = "quit"
                break
    except TimeoutError:
        trigger = "idle_timeout"
        logger.info("smtp_idle_timeout", extra={"timeout_seconds": idle_timeout})
    except OSError as exc:
        trigger = "transport_error"
        logger.warning("smtp_transport_error", extra={"error_type": type(exc).__name__})
    finally:
        session.close(trigger)
        writer.close()
        with contextlib.suppress(ConnectionError, OSError):
            await writer.wait_closed()
        logger.info(
            "smtp_connection_closed",
            extra={"trigger": trigger, **session.summary()},
        )
        reset_session_id(token)

    return session
