"""
MPPL Front End Package

Lexical analysis for MPPL, a small Pascal-like teaching language. The
parser and everything after it live elsewhere and consume the token
stream produced here.

Architecture:
    mppl/
    └── lexer/           # Tokenization and lexical analysis

License: MIT
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .lexer import Lexer, Token, TokenKind, tokenize_string

__all__ = [
    # Core classes
    "Lexer",
    "Token",
    "TokenKind",
    "tokenize_string",

    # Version info
    "__version__",
    "__license__",
]
