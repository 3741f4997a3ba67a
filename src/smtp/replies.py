"""Respostas fixas enviadas ao peer (terminadas em CRLF)."""

from __future__ import annotations

GREETING = "220 localhost SMTP server ready\r\n"
SENDER_OK = "250 Sender OK\r\n"
RECIPIENT_OK = "250 Recipient OK\r\n"
START_MAIL_INPUT = "354 Start mail input; end with <CRLF>.<CRLF>\r\n"
MAIL_ACCEPTED = "250 Mail accepted\r\n"
HELLO = "250 Hello\r\n"
OK = "250 OK\r\n"
BYE = "221 Bye\r\n"
UNKNOWN_COMMAND = "500 Unknown command\r\n"
