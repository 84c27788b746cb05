"""
calcexpr Lexer - turns an expression string into tokens

The top level is a flat stream. Function calls (``name<a, b>``) are
grouped as they are scanned: the tokenizer recurses into the call, splits
its arguments on the commas that belong to it, and hands back one FUNCTION
token carrying every argument already tokenized.

Nested calls cost one Python stack frame each, so absurdly deep nesting
ends in RecursionError rather than a lexer error.

xwest
"""

import copy
import json
import logging
from typing import Any, Dict, Iterator, List, Optional

from .tokens import (
    Token, TokenType, SINGLE_CHAR_TOKENS, EOF, COMMA, LEFT_FUNC_PAREN, RIGHT_FUNC_PAREN
)
from .errors import UnexpectedCharError, create_unexpected_char_error
from .nesting import NestingCounters
from .scanner import CharScanner

logger = logging.getLogger(__name__)

_SINGLE_CHAR = {char: Token(token_type) for char, token_type in SINGLE_CHAR_TOKENS.items()}


def _is_digit(char: str) -> bool:
    return '0' <= char <= '9'


def _is_letter(char: str) -> bool:
    return 'a' <= char <= 'z' or 'A' <= char <= 'Z'


def _is_identifier_part(char: str) -> bool:
    return _is_letter(char) or char.isspace()


class Tokenizer:
    """
    calcexpr lexical analyzer.

    Pull tokens one at a time with next_token(), or iterate. The stream
    always ends with exactly one EOF token; after that nothing more is
    produced.
    """

    def __init__(self, expression: str):
        """
        Initialize the tokenizer with an expression.

        Args:
            expression: Expression text, e.g. ``"1 + nvl<x, 0>"``
        """
        self.original_expression = expression
        self.scanner = CharScanner(expression)
        self.end = False

    @property
    def unexpected_char(self) -> Optional[str]:
        """First character that could not be classified, if any."""
        return self.scanner.unexpected_char

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        token = self.next_token()
        if token is None:
            raise StopIteration
        return token

    def next_token(self) -> Optional[Token]:
        """
        Return the next top-level token, or None once EOF has been returned.

        Bare commas and ``>`` carry no meaning outside a function call and
        are skipped here.

        Raises:
            UnexpectedCharError: If a character matches no token rule
        """
        return self._next_token_internal(include_comma=False, include_right_func_paren=False)

    def _next_token_for_function(self) -> Optional[Token]:
        """Like next_token() but surfaces commas and ``>`` for argument grouping."""
        return self._next_token_internal(include_comma=True, include_right_func_paren=True)

    def _next_token_internal(self, include_comma: bool, include_right_func_paren: bool) -> Optional[Token]:
        if self.end:
            return None

        while True:
            start = self.scanner.position
            char = self.scanner.advance()

            if char is None:
                self.end = True
                return EOF

            if char.isspace():
                self.scanner.consume_while(str.isspace)
                continue

            if _is_digit(char):
                digits = char + self.scanner.consume_while(_is_digit)
                return Token.number(digits)

            if _is_letter(char):
                name = self._collect_identifier(char)
                if self.scanner.peek() == '<':
                    return self._parse_function(name)
                return Token.variable(name)

            if char in _SINGLE_CHAR:
                return _SINGLE_CHAR[char]

            if char == ',':
                if include_comma:
                    return COMMA
                continue

            if char == '>':
                if include_right_func_paren:
                    return RIGHT_FUNC_PAREN
                continue

            if char == '<':
                return LEFT_FUNC_PAREN

            # Nothing can follow an unreadable character
            self.end = True
            self.scanner.record_unexpected(char, start)
            raise create_unexpected_char_error(char, start)

    def _collect_identifier(self, initial_char: str) -> str:
        """Collect a run of letters, dropping any whitespace inside or after it."""
        run = initial_char + self.scanner.consume_while(_is_identifier_part)
        return "".join(run.split())

    def _parse_function(self, name: str) -> Token:
        """
        Group the arguments of ``name<...>`` into a FUNCTION token.

        The scanner sits on the opening ``<``. Commas split arguments only
        when no bracket is open and no inner ``<`` is pending. Closing
        brackets with nothing to close are dropped. Empty arguments are
        dropped. If input ends before the closing ``>``, the last argument
        gets an EOF marker and the call is returned as it stands.
        """
        self.scanner.advance()

        counters = NestingCounters(angle=1)
        args: List[tuple] = []
        current: List[Token] = []

        def finish_argument():
            if current:
                args.append(tuple(current))
                current.clear()

        while True:
            token = self._next_token_for_function()
            logger.debug("function %s: pulled %r", name, token)

            if token is None or token.type == TokenType.EOF:
                current.append(EOF)
                finish_argument()
                break

            token_type = token.type

            if token_type == TokenType.COMMA:
                if counters.inside_brackets:
                    current.append(token)
                elif counters.angle == 1:
                    finish_argument()
                else:
                    current.append(token)

            elif token_type == TokenType.LEFT_FUNC_PAREN:
                if counters.enter_call() > 1:
                    current.append(token)

            elif token_type == TokenType.RIGHT_FUNC_PAREN:
                counters.leave_call()
                if counters.balanced:
                    finish_argument()
                    break
                current.append(token)

            elif token.is_open_bracket:
                counters.open(token_type)
                current.append(token)

            elif token.is_close_bracket:
                if counters.close(token_type):
                    current.append(token)
                else:
                    logger.debug("function %s: dropping unmatched %s", name, token)

            else:
                current.append(token)

            logger.debug("function %s: %s", name, counters)

        function = Token.function(name, args)
        logger.debug("grouped %s", function)
        return function

    def export_state(self) -> Dict[str, Any]:
        """
        Snapshot of the tokenizer for tooling.

        The remaining tokens are produced from a copy, so this tokenizer is
        left where it was.
        """
        clone = copy.deepcopy(self)
        tokens: List[Token] = []
        try:
            for token in clone:
                tokens.append(token)
        except UnexpectedCharError as e:
            logger.debug("export of %r stopped early: %r", self.original_expression, e)

        return {
            "original_expression": self.original_expression,
            "end": self.end,
            "unexpected_char": clone.unexpected_char,
            "tokens": [token.to_json_value() for token in tokens],
        }

    def to_json(self, indent: Optional[int] = None) -> str:
        """Serialize export_state() to a JSON string."""
        return json.dumps(self.export_state(), indent=indent, ensure_ascii=False)


class TokenStream:
    """
    Tokenizer already positioned on its first token.

    This is the entry point for a parser: ``current`` is the token under
    the cursor and advance() moves on.

    Raises:
        UnexpectedCharError: If not even the first token can be read
    """

    def __init__(self, expression: str):
        self.tokenizer = Tokenizer(expression)
        self.current: Optional[Token] = self.tokenizer.next_token()

    @property
    def exhausted(self) -> bool:
        return self.current is None

    def advance(self) -> Optional[Token]:
        """Move to the next token and return it (None past EOF)."""
        self.current = self.tokenizer.next_token()
        return self.current


def tokenize(expression: str) -> List[Token]:
    """
    Convenience function to tokenize an expression.

    Args:
        expression: Expression text

    Returns:
        List of tokens ending with EOF

    Raises:
        UnexpectedCharError: If lexing fails
    """
    return list(Tokenizer(expression))


def tokenize_file(filepath: str) -> List[Token]:
    """
    Convenience function to tokenize an expression stored in a file.

    Args:
        filepath: Path to a UTF-8 text file

    Returns:
        List of tokens

    Raises:
        UnexpectedCharError: If lexing fails
        IOError: If file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        expression = f.read()

    return tokenize(expression.strip())
