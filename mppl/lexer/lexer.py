"""
MPPL Lexer - turns source text into tokens for the parser

Four small scanners do the work, picked by the first character of each
token: names/keywords, unsigned integers, quoted strings and symbols.
Whitespace and both comment styles ({ ... } and /* ... */) are skipped
before every token.

Positions are UTF-8 byte offsets. Line/column mapping is left to whoever
reports diagnostics.
"""

import string
from enum import Enum, auto
from typing import Iterator, List, Optional, Tuple, Union

from .tokens import (
    Token, TokenKind, TokenValue, SINGLE_CHAR_SYMBOLS, SYMBOL_PREFIXES,
    UINT32_MAX, UINT32_MAX_DIGITS, lookup_keyword, lookup_symbol
)
from .errors import (
    LexerError, LexerWarning, IntegerOverflowError,
    create_unrecognized_symbol_warning, create_unterminated_string_warning,
    create_unterminated_comment_warning, create_lone_slash_warning
)


WHITESPACE = frozenset(" \t\n\r")
NAME_START = frozenset(string.ascii_letters)
NAME_CONTINUE = frozenset(string.ascii_letters + string.digits)
DIGITS = frozenset(string.digits)


class _CommentState(Enum):
    """States of the /* ... */ comment machine."""
    SLASH = auto()      # Opening '/' read, waiting for '*'
    STAR = auto()       # Just read '*', a '/' closes the comment
    OTHER = auto()      # Inside the comment body


class _StringState(Enum):
    """States of the quoted string machine."""
    INSIDE = auto()         # Reading string characters
    QUOTE_SEEN = auto()     # Just read a quote: closing, or first half of ''


def _utf8_width(char: str) -> int:
    """Number of bytes ``char`` occupies when encoded as UTF-8."""
    code = ord(char)
    if code < 0x80:
        return 1
    if code < 0x800:
        return 2
    if code < 0x10000:
        return 3
    return 4


class Lexer:
    """
    MPPL lexical analyzer.

    Holds a forward-only cursor over the source. ``next_token`` hands out
    one token at a time; ``tokenize`` drains the rest of the input.
    Unrecognized symbols come back as ``UNKNOWN`` tokens, unterminated
    strings and comments are absorbed with a warning, and integer literals
    above 32 bits raise ``IntegerOverflowError``.
    """

    def __init__(self, source: str, filename: str = "<unknown>"):
        """
        Initialize the lexer with source code.

        Args:
            source: Source code string
            filename: Name of source file for diagnostics
        """
        self._source = source
        self.filename = filename
        self._pos = 0       # Character index into source
        self._offset = 0    # UTF-8 byte offset matching _pos
        self.errors: List[LexerError] = []
        self.warnings: List[LexerWarning] = []

    @property
    def source(self) -> str:
        """The text being scanned; fixed for the lifetime of the lexer."""
        return self._source

    @property
    def offset(self) -> int:
        """Byte offset of the cursor."""
        return self._offset

    @property
    def at_end(self) -> bool:
        return self._pos >= len(self._source)

    def tokenize(self) -> List[Token]:
        """
        Tokenize the rest of the source.

        Errors raised while scanning a token are recorded in ``errors`` and
        scanning resumes after the offending text, so the returned list has
        no token for it. Callers must check ``has_errors()`` before trusting
        the result; ``tokenize_string`` raises the first error instead.

        Returns:
            List of tokens ending with exactly one EOF token
        """
        tokens: List[Token] = []

        while True:
            try:
                token = self.next_token()
            except LexerError as e:
                # The offending literal is already consumed
                self.errors.append(e)
                continue

            tokens.append(token)
            if token.is_eof:
                break

        return tokens

    def iter_tokens(self) -> Iterator[Token]:
        """Lazily yield tokens up to and including EOF."""
        while True:
            token = self.next_token()
            yield token
            if token.is_eof:
                return

    def __iter__(self) -> Iterator[Token]:
        return self.iter_tokens()

    def next_token(self) -> Token:
        """
        Scan and return the next token.

        Once the input is exhausted every call returns an EOF token at the
        end offset.

        Raises:
            IntegerOverflowError: If an integer literal exceeds 32 bits
        """
        self._skip_whitespace_and_comments()

        if self.at_end:
            return Token(TokenKind.EOF, self._offset, self._offset)

        start = self._offset
        kind, value = self._scan_token(self._advance(), start)
        return Token(kind, start, self._offset, value)

    def _scan_token(self, char: str, start: int) -> Tuple[TokenKind, TokenValue]:
        """Dispatch on the first character of a token."""
        if char in NAME_START:
            return self._scan_name_or_keyword(char)
        if char in DIGITS:
            return self._scan_unsigned_integer(char, start)
        if char == "'":
            return self._scan_string(start)
        return self._scan_symbol(char, start)

    def _skip_whitespace_and_comments(self):
        """Skip whitespace and comments."""
        while not self.at_end:
            char = self._peek()

            if char in WHITESPACE:
                self._advance()
                continue

            if char == "{":
                start = self._offset
                self._advance()
                self._skip_brace_comment(start)
                continue

            # Every '/' opens a comment, with or without a following '*'
            if char == "/":
                start = self._offset
                self._advance()
                self._skip_slash_comment(start)
                continue

            break

    def _skip_brace_comment(self, start: int):
        while not self.at_end:
            if self._advance() == "}":
                return

        self.warnings.append(create_unterminated_comment_warning(
            "}", self.filename, start, self._offset
        ))

    def _skip_slash_comment(self, start: int):
        if self._peek() != "*":
            self.warnings.append(create_lone_slash_warning(self.filename, start))

        state = _CommentState.SLASH
        while not self.at_end:
            char = self._advance()

            if state is _CommentState.SLASH:
                if char == "*":
                    state = _CommentState.STAR
            elif state is _CommentState.STAR:
                if char == "/":
                    return
                if char != "*":
                    state = _CommentState.OTHER
            elif char == "*":
                state = _CommentState.STAR

        self.warnings.append(create_unterminated_comment_warning(
            "*/", self.filename, start, self._offset
        ))

    def _scan_name_or_keyword(self, first: str) -> Tuple[TokenKind, TokenValue]:
        chars = [first]
        while self._peek() in NAME_CONTINUE:
            chars.append(self._advance())

        text = "".join(chars)
        kind = lookup_keyword(text)
        if kind is TokenKind.NAME:
            return kind, text
        return kind, None

    def _scan_unsigned_integer(self, first: str, start: int) -> Tuple[TokenKind, TokenValue]:
        digits = [first]
        while self._peek() in DIGITS:
            digits.append(self._advance())

        lexeme = "".join(digits)

        # Decide by length first; int() refuses very long digit strings
        significant = lexeme.lstrip("0") or "0"
        if len(significant) > UINT32_MAX_DIGITS or int(significant) > UINT32_MAX:
            raise IntegerOverflowError(lexeme, self.filename, start, self._offset)

        return TokenKind.UNSIGNED_INTEGER, int(significant)

    def _scan_string(self, start: int) -> Tuple[TokenKind, TokenValue]:
        """
        Scan a string whose opening quote is already consumed.

        A doubled quote stands for one literal quote. The closing quote is
        consumed but not kept.
        """
        state = _StringState.INSIDE
        chars = []

        while not self.at_end:
            char = self._peek()

            if state is _StringState.INSIDE:
                if char == "'":
                    state = _StringState.QUOTE_SEEN
                    self._advance()
                    continue
            elif char == "'":
                state = _StringState.INSIDE
            else:
                break

            chars.append(self._advance())

        if state is _StringState.INSIDE:
            self.warnings.append(create_unterminated_string_warning(
                self.filename, start, self._offset
            ))

        return TokenKind.STRING, "".join(chars)

    def _scan_symbol(self, first: str, start: int) -> Tuple[TokenKind, TokenValue]:
        """Scan an operator or punctuation symbol by maximal munch."""
        text = first

        while not self.at_end and text not in SINGLE_CHAR_SYMBOLS:
            if text + self._peek() not in SYMBOL_PREFIXES:
                break
            text += self._advance()

        kind = lookup_symbol(text)
        if kind is TokenKind.UNKNOWN:
            self.warnings.append(create_unrecognized_symbol_warning(
                text, self.filename, start, self._offset
            ))
            return kind, text

        return kind, None

    def _advance(self) -> str:
        """Consume one character, keeping the byte offset in step."""
        char = self._source[self._pos]
        self._pos += 1
        self._offset += _utf8_width(char)
        return char

    def _peek(self) -> Optional[str]:
        """Look at the current character without consuming it."""
        if self._pos < len(self._source):
            return self._source[self._pos]
        return None

    def has_errors(self) -> bool:
        """Check if lexer encountered any errors."""
        return len(self.errors) > 0

    def has_warnings(self) -> bool:
        """Check if lexer encountered any warnings."""
        return len(self.warnings) > 0

    def get_diagnostics(self) -> List[Union[LexerError, LexerWarning]]:
        """Get all diagnostics (errors and warnings)."""
        return self.errors + self.warnings


def tokenize_string(source: str, filename: str = "<string>") -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        filename: Filename for diagnostics

    Returns:
        List of tokens

    Raises:
        LexerError: If lexing fails
    """
    lexer = Lexer(source, filename)
    tokens = lexer.tokenize()

    if lexer.has_errors():
        # Raise the first error encountered
        raise lexer.errors[0]

    return tokens
