"""
Error handling for the MPPL lexer.

Provides diagnostics carrying byte spans into the source, error codes and
recovery suggestions. Only integer overflow is raised; everything else the
scanner tolerates is recorded as a warning and scanning continues.
"""

from typing import Optional, List
from dataclasses import dataclass


@dataclass
class Diagnostic:
    """Base record for lexer diagnostics (errors, warnings)."""
    message: str
    filename: str
    start: int
    end: int
    severity: str  # "error", "warning"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    @property
    def location(self) -> str:
        return f"{self.filename}[{self.start}:{self.end}]"

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        if self.code:
            severity_prefix += f"[{self.code}]"
        result = f"{severity_prefix}: {self.message}\n"
        result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class LexerError(Exception):
    """
    Exception raised when the lexer meets input it refuses to tokenize.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        filename: str,
        start: int,
        end: int,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            filename=filename,
            start=start,
            end=end,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def span(self):
        return (self.diagnostic.start, self.diagnostic.end)

    def __str__(self) -> str:
        return str(self.diagnostic)


class IntegerOverflowError(LexerError):
    """An unsigned integer literal that does not fit in 32 bits."""

    def __init__(self, lexeme: str, filename: str, start: int, end: int):
        super().__init__(
            message=f"Integer literal out of range: '{lexeme}'",
            filename=filename,
            start=start,
            end=end,
            code="L007",
            help_text="Unsigned integers must be at most 4294967295.",
        )
        self.lexeme = lexeme


class LexerWarning:
    """
    Represents a lexer warning that doesn't stop scanning.
    """

    def __init__(
        self,
        message: str,
        filename: str,
        start: int,
        end: int,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        self.diagnostic = Diagnostic(
            message=message,
            filename=filename,
            start=start,
            end=end,
            severity="warning",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def __str__(self) -> str:
        return str(self.diagnostic)


class ErrorRecovery:
    """
    Suggestion helpers for diagnostics.

    Maximal munch never extends an unknown symbol past its first
    character, so suggestions are keyed by single characters.
    """

    # Operators borrowed from other languages
    COMMON_MISTAKES = {
        "!": ["not"],
        "&": ["and"],
        "|": ["or"],
        "%": ["div"],
        "}": ["{ ... }"],
    }

    @staticmethod
    def suggest_symbol_corrections(invalid_symbol: str) -> List[str]:
        """Suggest MPPL spellings for a commonly mistyped operator character."""
        return list(ErrorRecovery.COMMON_MISTAKES.get(invalid_symbol, []))


# Common error codes for categorization
ERROR_CODES = {
    "L001": "Unrecognized symbol",
    "L002": "Unterminated string literal",
    "L007": "Integer literal overflow",
    "L011": "Unterminated comment",
    "L012": "Lone slash opens a comment",
}


# Helper functions for creating common diagnostics
def create_unrecognized_symbol_warning(symbol: str, filename: str,
                                       start: int, end: int) -> LexerWarning:
    """Create a warning for symbol text the symbol table cannot classify."""
    suggestions = ErrorRecovery.suggest_symbol_corrections(symbol)

    if suggestions:
        help_text = f"Did you mean: {', '.join(suggestions)}?"
    elif symbol.isprintable():
        help_text = f"The character '{symbol}' is not valid in MPPL source code."
    else:
        help_text = (f"Non-printable character (Unicode: U+{ord(symbol[0]):04X}) "
                     f"is not allowed.")

    return LexerWarning(
        message=f"Unrecognized symbol: {symbol!r}",
        filename=filename,
        start=start,
        end=end,
        code="L001",
        help_text=help_text,
        suggestions=suggestions
    )


def create_unterminated_string_warning(filename: str, start: int,
                                       end: int) -> LexerWarning:
    """Create a warning for a string literal that runs to end of input."""
    return LexerWarning(
        message="Unterminated string literal",
        filename=filename,
        start=start,
        end=end,
        code="L002",
        help_text="String literals must be closed with a single quote.",
        suggestions=["Add a closing ' quote",
                     "Write '' for a quote inside a string"]
    )


def create_unterminated_comment_warning(closing: str, filename: str,
                                        start: int, end: int) -> LexerWarning:
    """Create a warning for a comment that runs to end of input."""
    return LexerWarning(
        message="Unterminated comment",
        filename=filename,
        start=start,
        end=end,
        code="L011",
        help_text=f"The comment swallowed the rest of the input; close it with {closing!r}.",
    )


def create_lone_slash_warning(filename: str, start: int) -> LexerWarning:
    """Create a warning for a '/' that is not followed by '*'."""
    return LexerWarning(
        message="'/' starts a comment even without a following '*'",
        filename=filename,
        start=start,
        end=start + 1,
        code="L012",
        help_text="MPPL has no '/' operator; use 'div' for integer division.",
        suggestions=["div"]
    )
