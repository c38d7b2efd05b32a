"""
MPPL Lexer Package

Implements the lexical analyzer (tokenizer) for MPPL, a small Pascal-like
teaching language. The parser consumes its output.

Key Features:
- Brace { ... } and slash /* ... */ comments
- Quoted strings with '' as an escaped quote
- Maximal-munch operators (:=, <>, <=, >=)
- Reserved word recognition for lowercase keywords
- Unsigned 32-bit integer literals with overflow detection
- UTF-8 byte offsets on every token
"""

from .tokens import Token, TokenKind, TokenValue, KEYWORDS, SYMBOLS
from .lexer import Lexer, tokenize_string
from .errors import (
    Diagnostic, LexerError, IntegerOverflowError, LexerWarning, ErrorRecovery
)

__all__ = [
    "Lexer",
    "tokenize_string",
    "Token",
    "TokenKind",
    "TokenValue",
    "KEYWORDS",
    "SYMBOLS",
    "Diagnostic",
    "LexerError",
    "IntegerOverflowError",
    "LexerWarning",
    "ErrorRecovery",
]
