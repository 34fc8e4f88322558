"""
Gem Parser Package

Implements the recursive descent parser for the Gem language.
Produces immutable Abstract Syntax Trees rooted at a Program node.

Key Features:
- Recursive descent for declarations and blocks
- Precedence climbing for arithmetic expressions
- Single token of lookahead, pulled from the lexer on demand
- Fail-fast diagnostics, or a ParseResult via parse_source()

Author: xwest
"""

from .ast_nodes import *
from .parser import Parser, ParseResult, parse_string, parse_file, parse_source
from .errors import ParseError, ExpectationError, UnexpectedTokenError, NestingTooDeepError

__all__ = [
    # Core parser
    "Parser",
    "ParseResult",
    "parse_string",
    "parse_file",
    "parse_source",

    # AST nodes
    "ASTNode", "ASTNodeType", "Operation",
    "Expression", "NumberLiteral", "StringLiteral", "Variable",
    "BinaryOp", "FunctionCall", "NullExpression",
    "Statement", "Program", "FunctionDecl", "VariableDecl", "ExpressionStatement",

    # Error handling
    "ParseError", "ExpectationError", "UnexpectedTokenError", "NestingTooDeepError",
]
