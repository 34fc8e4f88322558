"""
Error handling for the Gem parser.

Every syntax error is fatal. The parser raises one of these categories:

- ExpectationError: a specific token was required and something else
  was found (missing ')', missing function name, missing ';').
- UnexpectedTokenError: the current token cannot start any construct
  valid at this position (a statement starting with '*').
- NestingTooDeepError: the input nests deeper than the parser can
  follow (hundreds of parentheses or nested functions).

Author: xwest
"""

from typing import Optional, List, Union

from ..lexer.tokens import Token, TokenType, describe_token, describe_token_type
from ..lexer.errors import GemError


class ParseError(GemError):
    """
    Exception raised when the parser encounters a fatal syntax error.

    Contains detailed diagnostic information for error reporting plus
    the token the parser was looking at.
    """

    def __init__(
        self,
        message: str,
        token: Optional[Token] = None,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(
            message,
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )
        self.token = token


class ExpectationError(ParseError):
    """A required token was missing."""

    def __init__(self, expected: str, found: Token, **kwargs):
        super().__init__(
            f"Expected {expected}, found {describe_token(found)}",
            token=found,
            **kwargs
        )
        self.expected = expected


class UnexpectedTokenError(ParseError):
    """The current token cannot begin a valid construct here."""

    def __init__(self, context: str, found: Token, **kwargs):
        super().__init__(
            f"Unexpected {describe_token(found)} while parsing {context}",
            token=found,
            **kwargs
        )
        self.context = context


class NestingTooDeepError(ParseError):
    """The input nests deeper than the recursive descent can follow."""

    def __init__(self, found: Token, **kwargs):
        super().__init__(
            f"Input nested too deeply to parse, stopped at {describe_token(found)}",
            token=found,
            **kwargs
        )


class SyntaxSuggestions:
    """Suggestion helpers used to enrich syntax error diagnostics."""

    @staticmethod
    def suggest_missing_token(expected: TokenType) -> List[str]:
        """Suggest what token might be missing."""
        token_suggestions = {
            TokenType.SEMICOLON: ["Add a semicolon ';' to end the declaration"],
            TokenType.RIGHT_PAREN: ["Add a closing parenthesis ')'"],
            TokenType.LEFT_PAREN: ["Add an opening parenthesis '(' before the parameter list"],
            TokenType.RIGHT_BRACE: ["Add a closing brace '}'"],
            TokenType.LEFT_BRACE: ["Add an opening brace '{' to start the body"],
            TokenType.IDENTIFIER: ["Provide a name made of letters and digits"],
        }

        return token_suggestions.get(expected, [])

    @staticmethod
    def suggest_for_context(context: str) -> List[str]:
        """Suggest what may legally appear in a given parsing context."""
        context_suggestions = {
            "statement": [
                "Start a function with 'func'",
                "Start a variable with 'var'",
                "Start an expression with a number, string, name or '('",
            ],
            "expression": [
                "Expressions start with a number, string, name or '('",
                "Ensure all operators have operands",
            ],
            "program": ["Check for an unmatched closing brace '}'"],
        }

        return context_suggestions.get(context, [])


# Helper functions for creating common parser errors

def create_expectation_error(expected: Union[TokenType, str], found: Token) -> ExpectationError:
    """Create an error for a required token that is missing."""
    if isinstance(expected, TokenType):
        expected_str = describe_token_type(expected)
        suggestions = SyntaxSuggestions.suggest_missing_token(expected)
    else:
        expected_str = expected
        suggestions = []

    return ExpectationError(
        expected_str,
        found,
        code="P002",
        help_text=f"The parser expected to see {expected_str} at this position.",
        suggestions=suggestions
    )


def create_unexpected_token_error(context: str, found: Token) -> UnexpectedTokenError:
    """Create an error for a token that cannot start anything here."""
    if found.type == TokenType.EOF:
        help_text = f"The input ended in the middle of a {context}."
    else:
        help_text = f"{describe_token(found)} cannot begin a {context}."

    return UnexpectedTokenError(
        context,
        found,
        code="P001",
        help_text=help_text,
        suggestions=SyntaxSuggestions.suggest_for_context(context)
    )


def create_nesting_too_deep_error(found: Token) -> NestingTooDeepError:
    """Create an error for input nested past the interpreter's recursion limit."""
    return NestingTooDeepError(
        found,
        code="P003",
        help_text="Parentheses and function declarations can only nest a few hundred levels deep.",
        suggestions=["Split the expression using intermediate variables"]
    )
