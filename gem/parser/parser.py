"""
Gem Recursive Descent Parser

Statements are parsed by plain recursive descent, binary expressions by
precedence climbing. The parser pulls tokens from the lexer one at a
time and never looks further ahead than the current token.

Any syntax error aborts the parse with a ParseError, no partial tree is
returned. parse_source() wraps the whole pipeline into a ParseResult for
callers that prefer a value over an exception.

Author: xwest
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ..lexer.lexer import Lexer
from ..lexer.tokens import Token, TokenType
from ..lexer.errors import GemError, LexerWarning
from .ast_nodes import (
    Operation, Expression, Statement, Program, FunctionDecl, VariableDecl,
    ExpressionStatement, NumberLiteral, StringLiteral, Variable, BinaryOp,
    FunctionCall, NullExpression
)
from .errors import (
    create_expectation_error, create_unexpected_token_error, create_nesting_too_deep_error
)

logger = logging.getLogger(__name__)

# Tokens that can begin a primary expression
EXPRESSION_START = (
    TokenType.NUMBER,
    TokenType.STRING,
    TokenType.IDENTIFIER,
    TokenType.LEFT_PAREN,
)


class Parser:
    """
    Gem parser.

    Drives a Lexer and builds a Program tree with one token of lookahead
    held in current_token.
    """

    def __init__(self, lexer: Lexer):
        """
        Initialize the parser and prime the lookahead token.

        Args:
            lexer: Lexer positioned at the start of the source
        """
        self.lexer = lexer
        self.current_token: Token = lexer.next_token()

    def parse(self) -> Program:
        """
        Parse the whole token stream.

        Returns:
            Program node holding the top-level statements in source order

        Raises:
            ParseError: On the first syntax error, NestingTooDeepError when
                the input nests past the interpreter's recursion limit
            LexerError: If the lexer is strict and meets malformed input
        """
        try:
            return self._parse_program()
        except RecursionError:
            raise create_nesting_too_deep_error(self.current_token) from None

    def _parse_program(self) -> Program:
        statements = []

        while not self._check(TokenType.EOF):
            if self._check(TokenType.RIGHT_BRACE):
                raise create_unexpected_token_error("program", self.current_token)

            statement = self._parse_statement()
            logger.debug("Parsed top-level %s", statement.node_type.value)
            statements.append(statement)
            self._match(TokenType.SEMICOLON)

        return Program(tuple(statements))

    # ------------------------------------------------------------------
    # Statements
    # ------------------------------------------------------------------

    def _parse_statement(self) -> Statement:
        """Parse a statement."""
        if self._check(TokenType.FUNC):
            return self._parse_function_declaration()
        elif self._check(TokenType.VAR):
            return self._parse_variable_declaration()
        else:
            return ExpressionStatement(self._parse_statement_expression())

    def _parse_statement_expression(self) -> Expression:
        if self.current_token.type not in EXPRESSION_START:
            raise create_unexpected_token_error("statement", self.current_token)
        return self._parse_binop(0)

    def _parse_block(self) -> Program:
        """Parse statements up to a closing brace or end of input."""
        statements = []

        while not self._check(TokenType.RIGHT_BRACE) and not self._check(TokenType.EOF):
            statements.append(self._parse_statement())
            # Semicolons between statements are optional
            self._match(TokenType.SEMICOLON)

        return Program(tuple(statements))

    def _parse_function_declaration(self) -> FunctionDecl:
        """Parse `func name(a, b) [: type] { ... }`."""
        self._consume(TokenType.FUNC)

        name = self._consume_identifier("function name")

        self._consume(TokenType.LEFT_PAREN)
        params = self._parse_parameter_list()
        self._consume(TokenType.RIGHT_PAREN)

        # Return type (optional)
        return_type: Expression = NullExpression()
        if self._match(TokenType.COLON):
            return_type = self._parse_primary()

        self._consume(TokenType.LEFT_BRACE)
        body = self._parse_block()
        self._consume(TokenType.RIGHT_BRACE)

        return FunctionDecl(return_type, name, tuple(params), body)

    def _parse_parameter_list(self) -> List[str]:
        """Parse parameter names up to (not including) the closing paren."""
        params = []

        while not self._check(TokenType.RIGHT_PAREN):
            params.append(self._consume_identifier("parameter name"))

            if self._match(TokenType.COMMA):
                continue
            if not self._check(TokenType.RIGHT_PAREN):
                raise create_expectation_error("',' or ')' after parameter", self.current_token)

        return params

    def _parse_variable_declaration(self) -> VariableDecl:
        """Parse `var name [= expression];`."""
        self._consume(TokenType.VAR)

        name = self._consume_identifier("variable name")

        initializer: Expression = NumberLiteral(0.0)
        if self._match(TokenType.ASSIGN):
            initializer = self.parse_expression()

        self._consume(TokenType.SEMICOLON)

        return VariableDecl(name, initializer)

    # ------------------------------------------------------------------
    # Expressions
    # ------------------------------------------------------------------

    def parse_expression(self) -> Expression:
        """Parse a full expression starting at the current token."""
        if self.current_token.type not in EXPRESSION_START:
            raise create_unexpected_token_error("expression", self.current_token)
        return self._parse_binop(0)

    def _parse_binop(self, min_precedence: int, left: Optional[Expression] = None) -> Expression:
        """
        Precedence climbing over the binary operators.

        Operators binding at least as tight as min_precedence are folded
        into the left operand, which keeps equal precedence left
        associative. A tighter operator after the right operand pulls
        the right operand into its own subtree first.
        """
        if left is None:
            left = self._parse_primary()

        operation = self._current_operation(min_precedence)
        while operation is not None:
            self._advance()  # Consume the operator
            right = self._parse_primary()

            next_operation = self._current_operation(operation.precedence + 1)
            while next_operation is not None:
                right = self._parse_binop(next_operation.precedence, right)
                next_operation = self._current_operation(operation.precedence + 1)

            left = BinaryOp(operation, left, right)
            operation = self._current_operation(min_precedence)

        return left

    def _current_operation(self, min_precedence: int) -> Optional[Operation]:
        """Operation for the current token if it binds at least min_precedence."""
        operation = Operation.from_token_type(self.current_token.type)
        if operation is not None and operation.precedence >= min_precedence:
            return operation
        return None

    def _parse_primary(self) -> Expression:
        """Parse a literal, variable, call or parenthesized expression."""
        token = self.current_token

        if token.type == TokenType.NUMBER:
            self._advance()
            return NumberLiteral(token.value)

        if token.type == TokenType.STRING:
            self._advance()
            return StringLiteral(token.value)

        if token.type == TokenType.IDENTIFIER:
            self._advance()
            if self._check(TokenType.LEFT_PAREN):
                return self._parse_function_call(token.value)
            return Variable(token.value)

        if token.type == TokenType.LEFT_PAREN:
            self._advance()
            expr = self.parse_expression()
            self._consume(TokenType.RIGHT_PAREN)
            return expr

        raise create_unexpected_token_error("expression", token)

    def _parse_function_call(self, name: str) -> FunctionCall:
        """Parse the argument list of a call to `name`."""
        self._consume(TokenType.LEFT_PAREN)

        args = []
        if not self._check(TokenType.RIGHT_PAREN):
            args.append(self.parse_expression())
            while self._match(TokenType.COMMA):
                args.append(self.parse_expression())

        self._consume(TokenType.RIGHT_PAREN)

        return FunctionCall(name, tuple(args))

    # ------------------------------------------------------------------
    # Token helpers
    # ------------------------------------------------------------------

    def _advance(self) -> Token:
        """Replace the lookahead with the next token, return the old one."""
        previous = self.current_token
        self.current_token = self.lexer.next_token()
        return previous

    def _check(self, token_type: TokenType) -> bool:
        return self.current_token.type == token_type

    def _match(self, token_type: TokenType) -> bool:
        """Consume the current token if it has the given type."""
        if self._check(token_type):
            self._advance()
            return True
        return False

    def _expect(self, token_type: TokenType):
        """Fail unless the current token is the given zero-payload token."""
        if self.current_token != Token(token_type):
            raise create_expectation_error(token_type, self.current_token)

    def _consume(self, token_type: TokenType) -> Token:
        """Consume token of expected type or raise error."""
        self._expect(token_type)
        return self._advance()

    def _consume_identifier(self, what: str) -> str:
        """Consume an identifier and return its name."""
        if not self._check(TokenType.IDENTIFIER):
            raise create_expectation_error(what, self.current_token)
        return self._advance().value


@dataclass
class ParseResult:
    """
    Outcome of parse_source().

    Holds the tree on success, or the error that stopped the parse.
    Lexer warnings are kept either way.
    """
    program: Optional[Program] = None
    errors: List[GemError] = field(default_factory=list)
    warnings: List[LexerWarning] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.program is not None and not self.errors

    def has_errors(self) -> bool:
        return len(self.errors) > 0

    def has_warnings(self) -> bool:
        return len(self.warnings) > 0


def parse_string(source: str, strict: bool = False) -> Program:
    """
    Convenience function to parse a source string.

    Args:
        source: Source code string
        strict: Fail on malformed input at the lexical level too

    Returns:
        Program AST

    Raises:
        ParseError: If parsing fails
        LexerError: If strict and the source contains malformed input
    """
    return Parser(Lexer(source, strict=strict)).parse()


def parse_file(filepath: str, strict: bool = False) -> Program:
    """
    Convenience function to parse a source file.

    Raises:
        ParseError: If parsing fails
        IOError: If file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return parse_string(source, strict=strict)


def parse_source(source: str, strict: bool = False) -> ParseResult:
    """
    Parse a source string without raising on syntax errors.

    Returns:
        ParseResult with either the program or the error that stopped it
    """
    lexer = Lexer(source, strict=strict)
    result = ParseResult()

    try:
        result.program = Parser(lexer).parse()
    except GemError as e:
        logger.debug("Parse failed: %s", e.message)
        result.errors.append(e)

    result.warnings.extend(lexer.warnings)
    return result
