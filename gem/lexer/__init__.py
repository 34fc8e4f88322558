"""
Gem Lexer Package

Implements the pull-based lexical analyzer (tokenizer) for the Gem language.

Key Features:
- One token per next_token() call, EOF repeats forever at end of input
- Number, string, identifier and keyword recognition
- Permissive by default, strict mode turns degradations into errors

Author: xwest
"""

from .tokens import Token, TokenType, KEYWORDS, OPERATORS
from .lexer import Lexer, tokenize_string, tokenize_file
from .errors import Diagnostic, GemError, LexerError, LexerWarning

__all__ = [
    "Lexer",
    "Token",
    "TokenType",
    "KEYWORDS",
    "OPERATORS",
    "tokenize_string",
    "tokenize_file",
    "Diagnostic",
    "GemError",
    "LexerError",
    "LexerWarning",
]
