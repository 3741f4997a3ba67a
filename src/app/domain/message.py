"""Mensagem capturada pelo listener SMTP.

Estrutura imutável: o store gera a cópia final (id e horário de
captura) com `dataclasses.replace`, nunca altera a instância recebida.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any


@dataclass(frozen=True, slots=True)
class Message:
    """Email capturado.

    Attributes:
        id: Identificador decimal atribuído pelo store no commit (vazio antes)
        sender: Argumento bruto do último MAIL FROM da transação
        recipients: Argumentos de cada RCPT TO, na ordem recebida
        subject: Assunto extraído dos headers, ou vazio
        is_html: True se algum header indica Content-Type text/html
        body: Dados após a linha em branco (ou todos os dados, sem separador)
        captured_at: Momento do commit no store (UTC)
    """

    sender: str = ""
    recipients: tuple[str, ...] = ()
    subject: str = ""
    is_html: bool = False
    body: str = ""
    id: str = ""
    captured_at: datetime | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serializa no formato JSON exposto pela API de consulta."""
        return {
            "id": self.id,
            "from": self.sender,
            "to": list(self.recipients),
            "subject": self.subject,
            "body": self.body,
            "html": self.is_html,
            "timestamp": self.captured_at.isoformat() if self.captured_at else None,
        }
