"""
Exports públicos do módulo smtp/commands.
"""

from smtp.commands.parser import Command, CommandVerb, parse_command

__all__ = [
    "Command",
    "CommandVerb",
    "parse_command",
]
