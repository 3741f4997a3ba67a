"""
Exports públicos do módulo smtp/message.
"""

from smtp.message.headers import ParsedData, parse_message_data, split_headers_and_body

__all__ = [
    "ParsedData",
    "parse_message_data",
    "split_headers_and_body",
]
