"""
Hill Parsers
=============

Input sanitation for user-supplied messages, keys, and dimensions.
"""

from hill.parsers.input_parser import parse_dimension, sanitize_message, validate_key

__all__ = [
    "parse_dimension",
    "sanitize_message",
    "validate_key",
]
