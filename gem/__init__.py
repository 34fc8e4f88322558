"""
Gem Front End Package

Lexer and parser for the Gem expression-and-declaration language.

Architecture:
    gem/
    ├── lexer/           # Tokenization (characters -> tokens)
    ├── parser/          # Syntax analysis (tokens -> AST)
    └── cli.py           # `gem` command line tool

Author: xwest
License: MIT
"""

__version__ = "0.1.0"
__author__ = "xwest"
__email__ = "dev@neuralscript.org"
__license__ = "MIT"

from .lexer import Lexer, Token, TokenType, GemError, LexerError
from .parser import Parser, ParseResult, ParseError, parse_string, parse_file, parse_source

__all__ = [
    # Core classes
    "Lexer",
    "Parser",
    "Token",
    "TokenType",
    "ParseResult",

    # Entry points
    "parse_string",
    "parse_file",
    "parse_source",

    # Errors
    "GemError",
    "LexerError",
    "ParseError",

    # Version info
    "__version__",
    "__author__",
    "__email__",
    "__license__",
]
