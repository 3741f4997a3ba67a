"""Testes da interpretação de linhas de comando."""

from __future__ import annotations

import pytest

from smtp.commands import Command, CommandVerb, parse_command


class TestParseCommand:
    """Palavra-chave sem diferenciar maiúsculas; argumento preservado."""

    @pytest.mark.parametrize(
        ("line", "verb", "argument"),
        [
            ("MAIL FROM:<a@x>", CommandVerb.MAIL, "<a@x>"),
            ("mail from: <A@X>  ", CommandVerb.MAIL, "<A@X>"),
            ("MAIL FROM:", CommandVerb.MAIL, ""),
            ("RCPT TO:<b@y>", CommandVerb.RCPT, "<b@y>"),
            ("Rcpt To:<B@y>", CommandVerb.RCPT, "<B@y>"),
            ("DATA", CommandVerb.DATA, ""),
            ("data", CommandVerb.DATA, ""),
            ("QUIT", CommandVerb.QUIT, ""),
            ("rset", CommandVerb.RSET, ""),
            ("NoOp", CommandVerb.NOOP, ""),
            ("HELO", CommandVerb.HELO, ""),
            ("EHLO client.example", CommandVerb.EHLO, "client.example"),
            ("helo client.example", CommandVerb.HELO, "client.example"),
        ],
    )
    def test_known_commands(self, line: str, verb: CommandVerb, argument: str) -> None:
        command = parse_command(line)
        assert command == Command(verb, argument)

    @pytest.mark.parametrize(
        "line",
        ["FOO", "", "DATA now", "QUIT please", "MAIL", "MAIL TO:<a@x>", "UNKNOWN", " DATA"],
    )
    def test_unknown_commands(self, line: str) -> None:
        assert parse_command(line).verb is CommandVerb.UNKNOWN
