"""
Exports públicos do módulo smtp/session.
"""

from smtp.session.connection import serve_connection
from smtp.session.handler import SessionResponse, SMTPSession
from smtp.session.transaction import Transaction, is_end_of_data

__all__ = [
    "SMTPSession",
    "SessionResponse",
    "Transaction",
    "is_end_of_data",
    "serve_connection",
]
