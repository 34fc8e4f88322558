"""
Tests for AST node behaviour: operators and text rendering.

Author: xwest
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from gem.lexer.tokens import TokenType
from gem.parser.parser import parse_string
from gem.parser.ast_nodes import (
    Operation, ASTNodeType, NumberLiteral, StringLiteral, Variable, BinaryOp,
    FunctionCall, NullExpression, VariableDecl, ExpressionStatement, Program
)


class TestOperation(unittest.TestCase):

    def test_precedences(self):
        self.assertEqual(Operation.ADD.precedence, 1)
        self.assertEqual(Operation.SUB.precedence, 1)
        self.assertEqual(Operation.MUL.precedence, 2)
        self.assertEqual(Operation.DIV.precedence, 2)

    def test_from_token_type(self):
        self.assertIs(Operation.from_token_type(TokenType.PLUS), Operation.ADD)
        self.assertIs(Operation.from_token_type(TokenType.SLASH), Operation.DIV)
        self.assertIsNone(Operation.from_token_type(TokenType.ASSIGN))

    def test_symbols(self):
        self.assertEqual([str(op) for op in Operation], ["+", "-", "*", "/"])


class TestRendering(unittest.TestCase):
    """str(node) prints the tree as readable text."""

    def test_numbers(self):
        self.assertEqual(str(NumberLiteral(12.0)), "12")
        self.assertEqual(str(NumberLiteral(3.14)), "3.14")
        self.assertEqual(str(NumberLiteral(0.0)), "0")

    def test_numbers_never_use_exponent_notation(self):
        self.assertEqual(str(NumberLiteral(0.0000001)), "0.0000001")
        self.assertEqual(str(NumberLiteral(1e20)), "100000000000000000000")
        self.assertEqual(str(NumberLiteral(float("inf"))), "inf")

    def test_string_and_variable(self):
        self.assertEqual(str(StringLiteral("Hello")), "str'Hello'")
        self.assertEqual(str(Variable("x")), "x")

    def test_binary_op_is_fully_parenthesized(self):
        expr = parse_string("a + b * c").statements[0]
        self.assertEqual(str(expr), "(a + (b * c))")

    def test_call(self):
        call = FunctionCall("add", (Variable("x"), NumberLiteral(2.0)))
        self.assertEqual(str(call), "add(x, 2)")
        self.assertEqual(str(FunctionCall("main")), "main()")

    def test_null_expression(self):
        self.assertEqual(str(NullExpression()), "")

    def test_variable_declaration(self):
        self.assertEqual(str(VariableDecl("y", NumberLiteral(3.14))), "variable y(3.14)")
        self.assertEqual(str(VariableDecl("z")), "variable z(0)")

    def test_function_declaration(self):
        decl = parse_string("func add(x, y) { x + y; }").statements[0]
        self.assertEqual(str(decl), "function add(x, y) {\n    (x + y)\n}")

    def test_function_with_return_type(self):
        decl = parse_string("func f(): num {}").statements[0]
        self.assertEqual(str(decl), "function f(): num {\n}")

    def test_nested_function_is_indented(self):
        decl = parse_string("func outer() { func inner() { 1 } }").statements[0]
        self.assertEqual(
            str(decl),
            "function outer() {\n"
            "    function inner() {\n"
            "        1\n"
            "    }\n"
            "}"
        )

    def test_program(self):
        program = parse_string('var x = "hi"; f(x)')
        self.assertEqual(str(program), "variable x(str'hi')\n\nf(x)\n\n")


class TestNodeStructure(unittest.TestCase):

    def test_node_types(self):
        self.assertIs(Program().node_type, ASTNodeType.PROGRAM)
        self.assertIs(NullExpression().node_type, ASTNodeType.NULL)
        self.assertIs(ExpressionStatement(Variable("a")).node_type, ASTNodeType.EXPRESSION_STMT)

    def test_children(self):
        expr = BinaryOp(Operation.ADD, Variable("a"), NumberLiteral(1.0))
        self.assertEqual(expr.children(), [Variable("a"), NumberLiteral(1.0)])
        self.assertEqual(Variable("a").children(), [])

    def test_program_is_iterable(self):
        program = parse_string("a; b")
        self.assertEqual(len(program), 2)
        self.assertEqual([str(s) for s in program], ["a", "b"])


if __name__ == '__main__':
    unittest.main()
