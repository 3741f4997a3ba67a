"""
Transação SMTP pendente: remetente, destinatários e linhas de dados.

Pertence a uma única sessão; nunca é compartilhada nem vista pelo store.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from app.domain.message import Message
from smtp.message.headers import LINE_SEPARATOR, parse_message_data

END_OF_DATA = "."


@dataclass(slots=True)
class Transaction:
    """Estado acumulado entre o início (ou RSET) e o fim de DATA."""

    sender: str = ""
    recipients: list[str] = field(default_factory=list)
    data_lines: list[str] = field(default_factory=list)

    def append_data_line(self, line: str) -> None:
        """Acumula uma linha de dados, desfazendo o dot-stuffing.

        Remove exatamente um ponto inicial; a linha terminadora "."
        não deve chegar aqui.
        """
        if line.startswith("."):
            line = line[1:]
        self.data_lines.append(line + LINE_SEPARATOR)

    @property
    def data(self) -> str:
        return "".join(self.data_lines)

    def to_message(self) -> Message:
        """Monta a mensagem candidata (sem id nem horário de captura)."""
        parsed = parse_message_data(self.data)
        return Message(
            sender=self.sender,
            recipients=tuple(self.recipients),
            subject=parsed.subject,
            is_html=parsed.is_html,
            body=parsed.body,
        )

    def reset(self) -> None:
        self.sender = ""
        self.recipients = []
        self.data_lines = []


def is_end_of_data(line: str) -> bool:
    """True apenas para a linha composta exclusivamente por um ponto."""
    return line == END_OF_DATA
