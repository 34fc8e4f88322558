"""
Error handling for the Gem lexer.

Provides the diagnostic model shared by the whole front end, the
fatal error raised in strict lexing mode, and the warning recorded
when the permissive lexer degrades malformed input.

Author: xwest
"""

from typing import Optional, List
from dataclasses import dataclass


@dataclass
class Diagnostic:
    """Base class for front end diagnostics (errors, warnings, info)."""
    message: str
    severity: str  # "error", "warning", "info", "hint"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        if self.code:
            result = f"{severity_prefix}[{self.code}]: {self.message}\n"
        else:
            result = f"{severity_prefix}: {self.message}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class GemError(Exception):
    """
    Base class of every fatal error raised by the Gem front end.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.message = message
        self.diagnostic = Diagnostic(
            message=message,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def __str__(self) -> str:
        return str(self.diagnostic)


class LexerError(GemError):
    """Raised by a strict lexer when it meets input it cannot tokenize."""


class LexerWarning:
    """
    Represents a lexer warning that doesn't stop compilation.

    Recorded by the permissive lexer whenever it silently degrades input
    (drops a character, truncates a string, overflows a number).
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        self.diagnostic = Diagnostic(
            message=message,
            severity="warning",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    @property
    def message(self) -> str:
        return self.diagnostic.message

    def __str__(self) -> str:
        return str(self.diagnostic)


# Error codes and the message each diagnostic starts with
ERROR_CODES = {
    "L001": "Invalid character",
    "L002": "Unterminated string literal",
    "L003": "Numeric literal out of range",
}


def _describe_char(char: str) -> str:
    if char.isprintable():
        return f"'{char}'"
    return f"U+{ord(char):04X}"


# Helper functions for creating common errors

def create_invalid_character_error(char: str) -> LexerError:
    """Create an error for an invalid character."""
    if char.isprintable():
        help_text = f"The character '{char}' is not valid in Gem source code."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return LexerError(
        message=f"{ERROR_CODES['L001']}: {_describe_char(char)}",
        code="L001",
        help_text=help_text,
        suggestions=["Remove the character", "Put it inside a string literal"]
    )


def create_unterminated_string_error(partial: str) -> LexerError:
    """Create an error for an unterminated string literal."""
    return LexerError(
        message=f"{ERROR_CODES['L002']}: {partial!r}",
        code="L002",
        help_text="String literals must be closed with a matching '\"' quote.",
        suggestions=["Add a closing \" quote", "Check for unescaped quotes in the string"]
    )


def create_invalid_number_error(lexeme: str, reason: str) -> LexerError:
    """Create an error for a numeric literal that overflows a float."""
    return LexerError(
        message=f"{ERROR_CODES['L003']}: '{lexeme}'",
        code="L003",
        help_text=reason,
        suggestions=["Use a number below 1.8e308"]
    )


def as_warning(error: LexerError) -> LexerWarning:
    """Downgrade a lexer error to a warning for permissive lexing."""
    diagnostic = error.diagnostic
    return LexerWarning(
        message=diagnostic.message,
        code=diagnostic.code,
        help_text=diagnostic.help_text,
        suggestions=diagnostic.suggestions
    )
