"""
Abstract Syntax Tree node definitions for Gem.

Every node is an immutable dataclass that owns its children outright
(sequences are stored as tuples), so two trees compare equal exactly
when they have the same shape and payloads. str(node) renders the
node back as readable text.

Author: xwest
"""

import math
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import ClassVar, List, Optional, Tuple

from ..lexer.tokens import TokenType


class ASTNodeType(Enum):
    """Enumeration of all AST node types."""

    # Statements
    PROGRAM = "Program"
    FUNCTION_DECL = "FunctionDecl"
    VARIABLE_DECL = "VariableDecl"
    EXPRESSION_STMT = "ExpressionStatement"

    # Expressions
    NUMBER_LITERAL = "NumberLiteral"
    STRING_LITERAL = "StringLiteral"
    VARIABLE = "Variable"
    BINARY_OP = "BinaryOp"
    FUNCTION_CALL = "FunctionCall"
    NULL = "NullExpression"


class Operation(Enum):
    """The four arithmetic operators, valued by their symbol."""
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"

    @property
    def precedence(self) -> int:
        """Binding strength, higher binds tighter."""
        return _PRECEDENCES[self]

    @classmethod
    def from_token_type(cls, token_type: TokenType) -> Optional['Operation']:
        """Operation for a binary operator token, None for anything else."""
        return _TOKEN_OPERATIONS.get(token_type)

    def __str__(self) -> str:
        return self.value


_PRECEDENCES = {
    Operation.ADD: 1,
    Operation.SUB: 1,
    Operation.MUL: 2,
    Operation.DIV: 2,
}

_TOKEN_OPERATIONS = {
    TokenType.PLUS: Operation.ADD,
    TokenType.MINUS: Operation.SUB,
    TokenType.STAR: Operation.MUL,
    TokenType.SLASH: Operation.DIV,
}


def _format_number(value: float) -> str:
    # Plain decimal, never exponent notation: 12.0 -> "12", 1e-07 -> "0.0000001"
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value.is_integer():
        return str(int(value))
    return format(Decimal(repr(value)), "f")


def _indent(text: str, prefix: str = "    ") -> str:
    return "\n".join(prefix + line if line else line for line in text.split("\n"))


class ASTNode:
    """Base class for all AST nodes."""

    node_type: ClassVar[ASTNodeType]

    def children(self) -> List['ASTNode']:
        """Get all child nodes."""
        return []

    def walk(self):
        """Yield this node and all of its descendants, depth first."""
        yield self
        for child in self.children():
            yield from child.walk()


# ============================================================================
# Expressions
# ============================================================================

class Expression(ASTNode):
    """Base class for expressions."""


@dataclass(frozen=True)
class NumberLiteral(Expression):
    """Numeric literal, always a float."""
    value: float

    node_type: ClassVar[ASTNodeType] = ASTNodeType.NUMBER_LITERAL

    def __str__(self) -> str:
        return _format_number(self.value)


@dataclass(frozen=True)
class StringLiteral(Expression):
    """String literal with escapes already resolved."""
    value: str

    node_type: ClassVar[ASTNodeType] = ASTNodeType.STRING_LITERAL

    def __str__(self) -> str:
        return f"str'{self.value}'"


@dataclass(frozen=True)
class Variable(Expression):
    """Reference to a named variable."""
    name: str

    node_type: ClassVar[ASTNodeType] = ASTNodeType.VARIABLE

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class BinaryOp(Expression):
    """Binary arithmetic operation."""
    operator: Operation
    left: Expression
    right: Expression

    node_type: ClassVar[ASTNodeType] = ASTNodeType.BINARY_OP

    def children(self) -> List[ASTNode]:
        return [self.left, self.right]

    def __str__(self) -> str:
        return f"({self.left} {self.operator} {self.right})"


@dataclass(frozen=True)
class FunctionCall(Expression):
    """Call of a named function with positional arguments."""
    name: str
    args: Tuple[Expression, ...] = ()

    node_type: ClassVar[ASTNodeType] = ASTNodeType.FUNCTION_CALL

    def children(self) -> List[ASTNode]:
        return list(self.args)

    def __str__(self) -> str:
        return f"{self.name}({', '.join(str(arg) for arg in self.args)})"


@dataclass(frozen=True)
class NullExpression(Expression):
    """Placeholder for an absent expression (e.g. no return type)."""

    node_type: ClassVar[ASTNodeType] = ASTNodeType.NULL

    def __str__(self) -> str:
        return ""


# ============================================================================
# Statements
# ============================================================================

class Statement(ASTNode):
    """Base class for statements."""


@dataclass(frozen=True)
class Program(Statement):
    """Ordered block of statements. Root of every parse and every function body."""
    statements: Tuple[Statement, ...] = ()

    node_type: ClassVar[ASTNodeType] = ASTNodeType.PROGRAM

    def children(self) -> List[ASTNode]:
        return list(self.statements)

    def __len__(self) -> int:
        return len(self.statements)

    def __iter__(self):
        return iter(self.statements)

    def __str__(self) -> str:
        return "".join(f"{stmt}\n\n" for stmt in self.statements)


@dataclass(frozen=True)
class FunctionDecl(Statement):
    """Function declaration with untyped parameters."""
    return_type: Expression
    name: str
    params: Tuple[str, ...]
    body: Program

    node_type: ClassVar[ASTNodeType] = ASTNodeType.FUNCTION_DECL

    def children(self) -> List[ASTNode]:
        return [self.return_type, self.body]

    def __str__(self) -> str:
        signature = f"function {self.name}({', '.join(self.params)})"
        if not isinstance(self.return_type, NullExpression):
            signature += f": {self.return_type}"

        body = "\n".join(str(stmt) for stmt in self.body.statements)
        if not body:
            return signature + " {\n}"
        return f"{signature} {{\n{_indent(body)}\n}}"


@dataclass(frozen=True)
class VariableDecl(Statement):
    """Variable declaration. The initializer is always present."""
    name: str
    initializer: Expression = field(default_factory=lambda: NumberLiteral(0.0))

    node_type: ClassVar[ASTNodeType] = ASTNodeType.VARIABLE_DECL

    def children(self) -> List[ASTNode]:
        return [self.initializer]

    def __str__(self) -> str:
        return f"variable {self.name}({self.initializer})"


@dataclass(frozen=True)
class ExpressionStatement(Statement):
    """Bare expression used as a statement."""
    expression: Expression

    node_type: ClassVar[ASTNodeType] = ASTNodeType.EXPRESSION_STMT

    def children(self) -> List[ASTNode]:
        return [self.expression]

    def __str__(self) -> str:
        return str(self.expression)
