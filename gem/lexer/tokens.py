"""
Token definitions for the Gem lexer.

This module defines every token type the Gem language knows about:
- Literals (numbers, strings)
- Identifiers
- Single-character operators and punctuation
- Keywords (func, var)

Tokens carry no source positions, two tokens are equal when their
type and payload are equal.

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Any, Dict


class TokenType(Enum):
    """
    Enumeration of all token types in Gem.

    Organized by category for clarity and maintainability.
    """

    # ========================================================================
    # Special Tokens
    # ========================================================================
    EOF = auto()                    # End of input

    # ========================================================================
    # Literals
    # ========================================================================
    NUMBER = auto()                 # 42, 3.14 (always a float payload)
    STRING = auto()                 # "hello\n"

    # ========================================================================
    # Identifiers
    # ========================================================================
    IDENTIFIER = auto()             # add, x1

    # ========================================================================
    # Keywords
    # ========================================================================
    FUNC = auto()                   # func
    VAR = auto()                    # var

    # ========================================================================
    # Operators
    # ========================================================================
    PLUS = auto()                   # +
    MINUS = auto()                  # -
    STAR = auto()                   # *
    SLASH = auto()                  # /
    ASSIGN = auto()                 # =

    # ========================================================================
    # Punctuation
    # ========================================================================
    COLON = auto()                  # :
    COMMA = auto()                  # ,
    DOT = auto()                    # .
    SEMICOLON = auto()              # ;
    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )
    LEFT_BRACE = auto()             # {
    RIGHT_BRACE = auto()            # }


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in the Gem language.

    Only literals and identifiers carry a value; every other token is
    fully described by its type.
    """
    type: TokenType
    value: Any = None               # float for NUMBER, str for STRING/IDENTIFIER

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.type.name}({self.value!r})"
        return self.type.name

    @property
    def is_literal(self) -> bool:
        """Check if this token is a literal value."""
        return self.type in (TokenType.NUMBER, TokenType.STRING)

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a keyword."""
        return self.type in KEYWORDS.values()

    @property
    def is_operator(self) -> bool:
        """Check if this token is an operator or punctuation symbol."""
        return self.type in OPERATORS.values()

    @property
    def is_identifier(self) -> bool:
        """Check if this token is an identifier."""
        return self.type == TokenType.IDENTIFIER

    @property
    def is_eof(self) -> bool:
        return self.type == TokenType.EOF


# Lookup tables used by the lexer for keyword/operator recognition

KEYWORDS: Dict[str, TokenType] = {
    "func": TokenType.FUNC,
    "var": TokenType.VAR,
}

OPERATORS: Dict[str, TokenType] = {
    # Arithmetic
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.STAR,
    "/": TokenType.SLASH,
    "=": TokenType.ASSIGN,

    # Punctuation
    ":": TokenType.COLON,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    ";": TokenType.SEMICOLON,
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
}

# Reverse lookup for diagnostics ("expected ')'" instead of "expected RIGHT_PAREN")
TOKEN_SPELLINGS: Dict[TokenType, str] = {
    **{token_type: symbol for symbol, token_type in OPERATORS.items()},
    **{token_type: word for word, token_type in KEYWORDS.items()},
}


def describe_token_type(token_type: TokenType) -> str:
    """Human readable name for a token type, used in error messages."""
    spelling = TOKEN_SPELLINGS.get(token_type)
    if spelling is not None:
        return f"'{spelling}'"
    if token_type == TokenType.EOF:
        return "end of input"
    return token_type.name.lower()


def describe_token(token: Token) -> str:
    """Human readable description of a concrete token."""
    if token.type == TokenType.IDENTIFIER:
        return f"identifier '{token.value}'"
    if token.type == TokenType.NUMBER:
        return f"number {token.value!r}"
    if token.type == TokenType.STRING:
        return f"string {token.value!r}"
    return describe_token_type(token.type)
