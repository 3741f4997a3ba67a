"""
Interpretação de linhas de comando SMTP.

A palavra-chave é comparada sem diferenciar maiúsculas; o argumento
preserva o texto original. Gramática simplificada: nenhuma validação
de endereço ou de sequência de comandos.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class CommandVerb(StrEnum):
    """Comandos reconhecidos pela sessão."""

    HELO = "HELO"
    EHLO = "EHLO"
    MAIL = "MAIL"
    RCPT = "RCPT"
    DATA = "DATA"
    RSET = "RSET"
    NOOP = "NOOP"
    QUIT = "QUIT"
    UNKNOWN = "UNKNOWN"


# Prefixos com argumento (comparados em maiúsculas)
MAIL_FROM_PREFIX = "MAIL FROM:"
RCPT_TO_PREFIX = "RCPT TO:"

# Comandos que devem ocupar a linha inteira
_EXACT_COMMANDS: dict[str, CommandVerb] = {
    "DATA": CommandVerb.DATA,
    "RSET": CommandVerb.RSET,
    "NOOP": CommandVerb.NOOP,
    "QUIT": CommandVerb.QUIT,
}

_GREETING_COMMANDS = frozenset({CommandVerb.HELO, CommandVerb.EHLO})


@dataclass(frozen=True, slots=True)
class Command:
    """Comando interpretado.

    Attributes:
        verb: Comando reconhecido (UNKNOWN se nenhum casou)
        argument: Argumento sem prefixo e sem espaços nas bordas
    """

    verb: CommandVerb
    argument: str = ""


def parse_command(line: str) -> Command:
    """Converte uma linha (sem CRLF) em Command.

    Exemplos:
        "MAIL FROM:<a@x>"  -> Command(MAIL, "<a@x>")
        "rcpt to: <b@y>"   -> Command(RCPT, "<b@y>")
        "EHLO client.test" -> Command(EHLO, "client.test")
        "data"             -> Command(DATA)
        "DATA now"         -> Command(UNKNOWN)
    """
    upper = line.upper()

    if upper.startswith(MAIL_FROM_PREFIX):
        return Command(CommandVerb.MAIL, line[len(MAIL_FROM_PREFIX):].strip())

    if upper.startswith(RCPT_TO_PREFIX):
        return Command(CommandVerb.RCPT, line[len(RCPT_TO_PREFIX):].strip())

    exact = _EXACT_COMMANDS.get(upper)
    if exact is not None:
        return Command(exact)

    keyword, _, rest = line.partition(" ")
    try:
        verb = CommandVerb(keyword.upper())
    except ValueError:
        verb = CommandVerb.UNKNOWN
    if verb in _GREETING_COMMANDS:
        return Command(verb, rest.strip())

    return Command(CommandVerb.UNKNOWN)
