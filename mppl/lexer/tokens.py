"""
Token definitions for the MPPL lexer.

This module defines every token kind the scanner can produce:
- The end-of-input marker
- Names, unsigned integer literals and string literals
- One kind per reserved keyword
- One kind per operator/punctuation symbol
- A catch-all for unrecognized symbol text

The classification tables at the bottom are built once at import time and
are read-only afterwards, so any number of lexers can share them.
"""

from enum import Enum, auto
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Tuple, Union


class TokenKind(Enum):
    """
    Closed, flat classification of MPPL tokens.

    Organized by category the same way the keyword and symbol tables are.
    """

    # ========================================================================
    # Special Tokens
    # ========================================================================
    EOF = auto()                    # End of input

    # ========================================================================
    # Names and Literals
    # ========================================================================
    NAME = auto()                   # count, name2name3
    UNSIGNED_INTEGER = auto()       # 0, 255
    STRING = auto()                 # 'text', 'it''s'

    # ========================================================================
    # Keywords
    # ========================================================================

    # Program structure
    PROGRAM = auto()                # program
    VAR = auto()                    # var
    ARRAY = auto()                  # array
    OF = auto()                     # of
    BEGIN = auto()                  # begin
    END = auto()                    # end
    PROCEDURE = auto()              # procedure

    # Control flow
    IF = auto()                     # if
    THEN = auto()                   # then
    ELSE = auto()                   # else
    RETURN = auto()                 # return
    CALL = auto()                   # call
    WHILE = auto()                  # while
    DO = auto()                     # do
    BREAK = auto()                  # break

    # Word operators
    NOT = auto()                    # not
    OR = auto()                     # or
    DIV = auto()                    # div
    AND = auto()                    # and

    # Standard types
    CHAR = auto()                   # char
    INTEGER = auto()                # integer
    BOOLEAN = auto()                # boolean

    # Input/output
    READ = auto()                   # read
    WRITE = auto()                  # write
    READLN = auto()                 # readln
    WRITELN = auto()                # writeln

    # Boolean constants
    TRUE = auto()                   # true
    FALSE = auto()                  # false

    # ========================================================================
    # Symbols
    # ========================================================================

    # Arithmetic
    PLUS = auto()                   # +
    MINUS = auto()                  # -
    STAR = auto()                   # *

    # Comparison
    EQUAL = auto()                  # =
    NOT_EQUAL = auto()              # <>
    LESS = auto()                   # <
    LESS_EQUAL = auto()             # <=
    GREATER = auto()                # >
    GREATER_EQUAL = auto()          # >=

    # Delimiters
    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )
    LEFT_BRACKET = auto()           # [
    RIGHT_BRACKET = auto()          # ]
    ASSIGN = auto()                 # :=
    DOT = auto()                    # .
    COMMA = auto()                  # ,
    COLON = auto()                  # :
    SEMICOLON = auto()              # ;

    # ========================================================================
    # Error Token
    # ========================================================================
    UNKNOWN = auto()                # Anything the symbol table cannot classify


# Payload carried by a token: nothing, an unsigned 32-bit integer, or text
TokenValue = Optional[Union[int, str]]


@dataclass(frozen=True)
class Token:
    """
    A classified, positioned unit of MPPL source.

    ``start`` and ``end`` are UTF-8 byte offsets forming the half-open range
    ``[start, end)``. ``value`` is only set for names, integer literals,
    string literals and unknown symbol text.
    """
    kind: TokenKind
    start: int
    end: int
    value: TokenValue = None

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.kind.name}({self.value!r})"
        return self.kind.name

    def __repr__(self) -> str:
        return (f"Token({self.kind.name}, {self.start}, {self.end}, "
                f"{self.value!r})")

    @property
    def span(self) -> Tuple[int, int]:
        return (self.start, self.end)

    @property
    def length(self) -> int:
        return self.end - self.start

    @property
    def is_eof(self) -> bool:
        return self.kind is TokenKind.EOF

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a reserved keyword."""
        return self.kind in KEYWORD_KINDS

    @property
    def is_symbol(self) -> bool:
        """Check if this token is a recognized operator or punctuation."""
        return self.kind in SYMBOL_KINDS

    @property
    def is_literal(self) -> bool:
        """Check if this token is an integer, string or boolean literal."""
        return self.kind in {
            TokenKind.UNSIGNED_INTEGER, TokenKind.STRING,
            TokenKind.TRUE, TokenKind.FALSE,
        }


# Lookup tables used by the lexer for keyword/symbol recognition.
# Wrapped in MappingProxyType/frozenset so nothing can mutate them.

KEYWORDS: Mapping[str, TokenKind] = MappingProxyType({
    # Program structure
    "program": TokenKind.PROGRAM,
    "var": TokenKind.VAR,
    "array": TokenKind.ARRAY,
    "of": TokenKind.OF,
    "begin": TokenKind.BEGIN,
    "end": TokenKind.END,
    "procedure": TokenKind.PROCEDURE,

    # Control flow
    "if": TokenKind.IF,
    "then": TokenKind.THEN,
    "else": TokenKind.ELSE,
    "return": TokenKind.RETURN,
    "call": TokenKind.CALL,
    "while": TokenKind.WHILE,
    "do": TokenKind.DO,
    "break": TokenKind.BREAK,

    # Word operators
    "not": TokenKind.NOT,
    "or": TokenKind.OR,
    "div": TokenKind.DIV,
    "and": TokenKind.AND,

    # Standard types
    "char": TokenKind.CHAR,
    "integer": TokenKind.INTEGER,
    "boolean": TokenKind.BOOLEAN,

    # Input/output
    "read": TokenKind.READ,
    "write": TokenKind.WRITE,
    "readln": TokenKind.READLN,
    "writeln": TokenKind.WRITELN,

    # Boolean constants
    "true": TokenKind.TRUE,
    "false": TokenKind.FALSE,
})

SYMBOLS: Mapping[str, TokenKind] = MappingProxyType({
    # Arithmetic
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,

    # Comparison
    "=": TokenKind.EQUAL,
    "<>": TokenKind.NOT_EQUAL,
    "<": TokenKind.LESS,
    "<=": TokenKind.LESS_EQUAL,
    ">": TokenKind.GREATER,
    ">=": TokenKind.GREATER_EQUAL,

    # Delimiters
    "(": TokenKind.LEFT_PAREN,
    ")": TokenKind.RIGHT_PAREN,
    "[": TokenKind.LEFT_BRACKET,
    "]": TokenKind.RIGHT_BRACKET,
    ":=": TokenKind.ASSIGN,
    ".": TokenKind.DOT,
    ",": TokenKind.COMMA,
    ":": TokenKind.COLON,
    ";": TokenKind.SEMICOLON,
})

# Symbols that are complete as soon as their first character is read
SINGLE_CHAR_SYMBOLS = frozenset({
    "+", "-", "*", "=", "(", ")", "[", "]", ".", ",", ";",
})

# Every proper or full prefix of a known symbol; maximal munch only keeps
# extending a symbol while the buffer stays in this set
SYMBOL_PREFIXES = frozenset(
    symbol[:i] for symbol in SYMBOLS for i in range(1, len(symbol) + 1)
)

KEYWORD_KINDS = frozenset(KEYWORDS.values())
SYMBOL_KINDS = frozenset(SYMBOLS.values())

# Reserved words are only looked up for texts within these lengths
KEYWORD_MIN_LENGTH = 2
KEYWORD_MAX_LENGTH = 10

UINT32_MAX = 0xFFFFFFFF
UINT32_MAX_DIGITS = len(str(UINT32_MAX))


def lookup_keyword(text: str) -> TokenKind:
    """Classify identifier text as a keyword kind or ``TokenKind.NAME``."""
    if not KEYWORD_MIN_LENGTH <= len(text) <= KEYWORD_MAX_LENGTH:
        return TokenKind.NAME
    return KEYWORDS.get(text, TokenKind.NAME)


def lookup_symbol(text: str) -> TokenKind:
    """Classify symbol text, falling back to ``TokenKind.UNKNOWN``."""
    return SYMBOLS.get(text, TokenKind.UNKNOWN)
