"""
Extração mínima de campos do conteúdo recebido em DATA.

Deliberadamente simples: separa headers e corpo na primeira linha em
branco e procura apenas Subject e Content-Type text/html, linha a linha.
Headers dobrados, MIME multipart e encoded-words não são tratados.
"""

from __future__ import annotations

from dataclasses import dataclass

LINE_SEPARATOR = "\r\n"
HEADER_BODY_SEPARATOR = "\r\n\r\n"

_SUBJECT_PREFIX = "subject:"
_HTML_MARKER = "content-type: text/html"


@dataclass(frozen=True, slots=True)
class ParsedData:
    """Campos extraídos do conteúdo de uma mensagem."""

    subject: str = ""
    is_html: bool = False
    body: str = ""


def split_headers_and_body(data: str) -> tuple[str, str]:
    """Separa headers e corpo na primeira linha em branco.

    Sem separador, tudo é corpo e os headers ficam vazios.
    """
    headers, separator, body = data.partition(HEADER_BODY_SEPARATOR)
    if not separator:
        return "", data
    return headers, body


def parse_message_data(data: str) -> ParsedData:
    """Extrai assunto, indicação de HTML e corpo do conteúdo bruto.

    O último header Subject vence quando repetido.
    """
    headers, body = split_headers_and_body(data)

    subject = ""
    is_html = False
    for line in headers.split(LINE_SEPARATOR):
        lowered = line.lower()
        if lowered.startswith(_SUBJECT_PREFIX):
            subject = line[len(_SUBJECT_PREFIX):].strip()
        if _HTML_MARKER in lowered:
            is_html = True

    return ParsedData(subject=subject, is_html=is_html, body=body)
