"""
Gem Lexer - turns source text into tokens, one at a time

The parser pulls tokens on demand through next_token(), so the lexer
never materializes the whole token list unless asked to (tokenize()).
The cursor only ever moves forward.

By default the lexer is permissive: junk characters are dropped,
unterminated strings are cut at end of input and numbers too large
for a float become infinity. Every such degradation is kept in
self.warnings. Pass strict=True to turn them into LexerError instead.

xwest
"""

import logging
import math
from typing import Iterator, List

from .tokens import Token, TokenType, KEYWORDS, OPERATORS
from .errors import (
    LexerError, LexerWarning, as_warning, create_invalid_character_error,
    create_unterminated_string_error, create_invalid_number_error
)

logger = logging.getLogger(__name__)

# Escapes resolved inside string literals, anything else is kept verbatim
ESCAPE_SEQUENCES = {
    'n': '\n',
    't': '\t',
    '"': '"',
    '\\': '\\',
}

EOF_TOKEN = Token(TokenType.EOF)


def _is_ascii_digit(char: str) -> bool:
    return '0' <= char <= '9'


def _is_ascii_letter(char: str) -> bool:
    return ('a' <= char <= 'z') or ('A' <= char <= 'Z')


class Lexer:
    """
    Gem lexical analyzer.

    Converts source code text into a stream of tokens. Holds nothing but
    the source and a cursor into it.
    """

    def __init__(self, source: str, strict: bool = False):
        """
        Initialize the lexer with source code.

        Args:
            source: Complete program source
            strict: Raise LexerError instead of silently degrading bad input
        """
        self.source = source
        self.strict = strict
        self.pos = 0
        self.warnings: List[LexerWarning] = []

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens until (but not including) end of input."""
        while True:
            token = self.next_token()
            if token.type == TokenType.EOF:
                return
            yield token

    def tokenize(self) -> List[Token]:
        """
        Tokenize the rest of the source.

        Returns:
            List of tokens including the EOF token
        """
        tokens = list(self)
        tokens.append(EOF_TOKEN)
        return tokens

    def next_token(self) -> Token:
        """
        Scan and return the next token.

        Keeps returning EOF once the source is exhausted.
        """
        while True:
            self._skip_whitespace()

            if self._at_end():
                return EOF_TOKEN

            current_char = self.source[self.pos]

            if current_char in OPERATORS:
                self._advance()
                return Token(OPERATORS[current_char])

            if current_char == '"':
                return self._tokenize_string()

            if _is_ascii_digit(current_char):
                return self._tokenize_number()

            if _is_ascii_letter(current_char):
                return self._tokenize_identifier_or_keyword()

            # Unknown character: drop it and try again
            self._report(create_invalid_character_error(current_char))
            self._advance()

    def _tokenize_number(self) -> Token:
        """Tokenize digits with an optional single fractional part."""
        start_pos = self.pos

        while not self._at_end() and _is_ascii_digit(self.source[self.pos]):
            self._advance()

        if not self._at_end() and self.source[self.pos] == '.':
            self._advance()
            while not self._at_end() and _is_ascii_digit(self.source[self.pos]):
                self._advance()

        lexeme = self.source[start_pos:self.pos]

        value = float(lexeme)
        if math.isinf(value):
            self._report(create_invalid_number_error(lexeme, "The value is too large for a 64-bit float."))

        return Token(TokenType.NUMBER, value)

    def _tokenize_identifier_or_keyword(self) -> Token:
        """Tokenize an identifier, or a keyword if the text is reserved."""
        start_pos = self.pos

        # First character is already known to be a letter
        self._advance()

        while not self._at_end() and self.source[self.pos].isalnum():
            self._advance()

        lexeme = self.source[start_pos:self.pos]

        keyword = KEYWORDS.get(lexeme)
        if keyword is not None:
            return Token(keyword)
        return Token(TokenType.IDENTIFIER, lexeme)

    def _tokenize_string(self) -> Token:
        """Tokenize a double quoted string literal, resolving escapes."""
        self._advance()  # Skip opening quote

        value_parts = []

        while not self._at_end() and self.source[self.pos] != '"':
            char = self.source[self.pos]
            self._advance()

            if char != '\\':
                value_parts.append(char)
                continue

            if self._at_end():
                value_parts.append('\\')
                break

            escape_char = self.source[self.pos]
            self._advance()
            value_parts.append(ESCAPE_SEQUENCES.get(escape_char, '\\' + escape_char))

        value = ''.join(value_parts)

        if self._at_end():
            self._report(create_unterminated_string_error(value))
        else:
            self._advance()  # Skip closing quote

        return Token(TokenType.STRING, value)

    def _skip_whitespace(self):
        while not self._at_end() and self.source[self.pos].isspace():
            self._advance()

    def _report(self, error: LexerError):
        """Raise in strict mode, otherwise record and log a warning."""
        if self.strict:
            raise error
        warning = as_warning(error)
        self.warnings.append(warning)
        logger.warning("%s (offset %d)", warning.message, self.pos)

    def _at_end(self) -> bool:
        return self.pos >= len(self.source)

    def _advance(self):
        """Advance position by one character."""
        if self.pos < len(self.source):
            self.pos += 1

    def has_warnings(self) -> bool:
        """Check if lexer degraded any input so far."""
        return len(self.warnings) > 0

    def get_diagnostics(self) -> List[LexerWarning]:
        """Get all diagnostics collected so far."""
        return list(self.warnings)


def tokenize_string(source: str, strict: bool = False) -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        strict: Fail on malformed input instead of degrading it

    Returns:
        List of tokens ending with EOF

    Raises:
        LexerError: If strict and the source contains malformed input
    """
    return Lexer(source, strict=strict).tokenize()


def tokenize_file(filepath: str, strict: bool = False) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Raises:
        LexerError: If strict and the source contains malformed input
        IOError: If file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return tokenize_string(source, strict=strict)
