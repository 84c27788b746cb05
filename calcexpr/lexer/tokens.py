"""
Token definitions for the calcexpr lexer.

This module defines every token the lexer can produce:
- Numbers (exact decimals) and variables
- Function calls written as ``name<arg, arg, ...>``
- Arithmetic operators and the three bracket families
- Function brackets, commas and the EOF sentinel

It also holds the operator precedence order a downstream parser binds with.

Author: xwest
"""

from enum import Enum, IntEnum, auto
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Iterable, Tuple, Union


class TokenType(Enum):
    """
    Enumeration of all token types in calcexpr.

    Organized by category for clarity and maintainability.
    """

    # ========================================================================
    # Literals
    # ========================================================================
    NUMBER = auto()                 # 42
    VARIABLE = auto()               # x, rate
    FUNCTION = auto()               # nvl<1, 0>

    # ========================================================================
    # Operators
    # ========================================================================
    ADD = auto()                    # +
    SUB = auto()                    # -
    MUL = auto()                    # *
    DIV = auto()                    # /
    CARET = auto()                  # ^

    # ========================================================================
    # Punctuation and Delimiters
    # ========================================================================
    LEFT_SMALL_PAREN = auto()       # (
    RIGHT_SMALL_PAREN = auto()      # )
    LEFT_MID_PAREN = auto()         # [
    RIGHT_MID_PAREN = auto()        # ]
    LEFT_BIG_PAREN = auto()         # {
    RIGHT_BIG_PAREN = auto()        # }
    LEFT_FUNC_PAREN = auto()        # <
    RIGHT_FUNC_PAREN = auto()       # >
    COMMA = auto()                  # ,

    # ========================================================================
    # Special Tokens
    # ========================================================================
    EOF = auto()                    # End of input


class OperatorPrecedence(IntEnum):
    """
    Binding strength of operators, weakest first.

    NEGATIVE has no token of its own; it is reserved for the unary minus
    a parser synthesizes.
    """
    DEFAULT = 0
    ADD_OR_SUBTRACT = 1
    MULTIPLY_OR_DIVIDE = 2
    POWER = 3
    NEGATIVE = 4
    FUNCTION = 5


@dataclass(frozen=True)
class FunctionCall:
    """
    Payload of a FUNCTION token.

    Each entry of ``args`` is one argument slot, already tokenized.
    """
    name: str
    args: Tuple[Tuple["Token", ...], ...] = ()

    def __str__(self) -> str:
        slots = (" ".join(str(token) for token in slot) for slot in self.args)
        return f"{self.name}<{','.join(slots)}>"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token of an expression.

    ``value`` is a Decimal for NUMBER, a str for VARIABLE, a FunctionCall
    for FUNCTION and None for everything else.
    """
    type: TokenType
    value: Any = None

    @classmethod
    def number(cls, value: Union[int, str, Decimal]) -> "Token":
        return cls(TokenType.NUMBER, Decimal(value))

    @classmethod
    def variable(cls, name: str) -> "Token":
        return cls(TokenType.VARIABLE, name)

    @classmethod
    def function(cls, name: str, args: Iterable[Iterable["Token"]] = ()) -> "Token":
        return cls(TokenType.FUNCTION, FunctionCall(name, tuple(tuple(slot) for slot in args)))

    def __str__(self) -> str:
        if self.type in (TokenType.NUMBER, TokenType.VARIABLE, TokenType.FUNCTION):
            return str(self.value)
        return DISPLAY_SYMBOLS[self.type]

    def __repr__(self) -> str:
        if self.value is None:
            return f"Token({self.type.name})"
        return f"Token({self.type.name}, {self.value!r})"

    @property
    def precedence(self) -> OperatorPrecedence:
        """Binding strength used when building an expression tree."""
        return PRECEDENCE.get(self.type, OperatorPrecedence.DEFAULT)

    @property
    def lexeme(self) -> str:
        """ASCII source text that scans back to this token."""
        if self.type == TokenType.FUNCTION:
            slots = (_join_source(slot, name_separator=" ") for slot in self.value.args)
            return f"{self.value.name}<{', '.join(slots)}>"
        if self.type in (TokenType.NUMBER, TokenType.VARIABLE):
            return str(self.value)
        return SOURCE_SYMBOLS.get(self.type, "")

    @property
    def is_operator(self) -> bool:
        """Check if this token is a binary arithmetic operator."""
        return self.type in PRECEDENCE and self.type != TokenType.FUNCTION

    @property
    def is_open_bracket(self) -> bool:
        return self.type in BRACKET_PAIRS

    @property
    def is_close_bracket(self) -> bool:
        return self.type in CLOSING_BRACKETS

    def to_json_value(self) -> Any:
        """
        JSON-compatible form of the token.

        Payload-free tokens become their CamelCase name ("Add",
        "LeftSmallParen", "EOF"); the others become a one-key object.
        """
        if self.type == TokenType.NUMBER:
            return {"Number": str(self.value)}
        if self.type == TokenType.VARIABLE:
            return {"Variable": self.value}
        if self.type == TokenType.FUNCTION:
            return {
                "Function": {
                    "function_prefix": self.value.name,
                    "args": [[token.to_json_value() for token in slot]
                             for slot in self.value.args],
                }
            }
        return SERIAL_NAMES[self.type]


# Lookup tables for token recognition and rendering

# Single characters that always map to the same token
SINGLE_CHAR_TOKENS = {
    "+": TokenType.ADD,
    "-": TokenType.SUB,
    "*": TokenType.MUL,
    "/": TokenType.DIV,
    "^": TokenType.CARET,
    "(": TokenType.LEFT_SMALL_PAREN,
    ")": TokenType.RIGHT_SMALL_PAREN,
    "[": TokenType.LEFT_MID_PAREN,
    "]": TokenType.RIGHT_MID_PAREN,
    "{": TokenType.LEFT_BIG_PAREN,
    "}": TokenType.RIGHT_BIG_PAREN,
}

SOURCE_SYMBOLS = {token_type: char for char, token_type in SINGLE_CHAR_TOKENS.items()}
SOURCE_SYMBOLS.update({
    TokenType.LEFT_FUNC_PAREN: "<",
    TokenType.RIGHT_FUNC_PAREN: ">",
    TokenType.COMMA: ",",
})

# Diagnostic rendering uses the typographic multiply and divide signs
DISPLAY_SYMBOLS = dict(SOURCE_SYMBOLS)
DISPLAY_SYMBOLS.update({
    TokenType.MUL: "×",
    TokenType.DIV: "÷",
    TokenType.EOF: "EOF",
})

SERIAL_NAMES = {
    TokenType.ADD: "Add",
    TokenType.SUB: "Sub",
    TokenType.MUL: "Mul",
    TokenType.DIV: "Div",
    TokenType.CARET: "Caret",
    TokenType.LEFT_SMALL_PAREN: "LeftSmallParen",
    TokenType.RIGHT_SMALL_PAREN: "RightSmallParen",
    TokenType.LEFT_MID_PAREN: "LeftMidParen",
    TokenType.RIGHT_MID_PAREN: "RightMidParen",
    TokenType.LEFT_BIG_PAREN: "LeftBigParen",
    TokenType.RIGHT_BIG_PAREN: "RightBigParen",
    TokenType.LEFT_FUNC_PAREN: "LeftFuncParen",
    TokenType.RIGHT_FUNC_PAREN: "RightFuncParen",
    TokenType.COMMA: "Comma",
    TokenType.EOF: "EOF",
}

PRECEDENCE = {
    TokenType.ADD: OperatorPrecedence.ADD_OR_SUBTRACT,
    TokenType.SUB: OperatorPrecedence.ADD_OR_SUBTRACT,
    TokenType.MUL: OperatorPrecedence.MULTIPLY_OR_DIVIDE,
    TokenType.DIV: OperatorPrecedence.MULTIPLY_OR_DIVIDE,
    TokenType.CARET: OperatorPrecedence.POWER,
    TokenType.FUNCTION: OperatorPrecedence.FUNCTION,
}

# Opening bracket -> matching closing bracket
BRACKET_PAIRS = {
    TokenType.LEFT_SMALL_PAREN: TokenType.RIGHT_SMALL_PAREN,
    TokenType.LEFT_MID_PAREN: TokenType.RIGHT_MID_PAREN,
    TokenType.LEFT_BIG_PAREN: TokenType.RIGHT_BIG_PAREN,
}

CLOSING_BRACKETS = {close: open_ for open_, close in BRACKET_PAIRS.items()}

# Payload-free tokens the lexer hands out directly
LEFT_FUNC_PAREN = Token(TokenType.LEFT_FUNC_PAREN)
RIGHT_FUNC_PAREN = Token(TokenType.RIGHT_FUNC_PAREN)
COMMA = Token(TokenType.COMMA)
EOF = Token(TokenType.EOF)


def render(tokens: Iterable[Token]) -> str:
    """Diagnostic rendering of a token sequence, space separated."""
    return " ".join(str(token) for token in tokens)


def to_source(tokens: Iterable[Token]) -> str:
    """
    Re-tokenizable ASCII text for a top-level token sequence. EOF is omitted.

    A variable followed directly by another name gets a comma in between,
    which the top level skips; a space would merge the two identifiers.
    """
    return _join_source(tokens, name_separator=", ")


def _join_source(tokens: Iterable[Token], name_separator: str) -> str:
    text = ""
    previous = None
    for token in tokens:
        if token.type == TokenType.EOF:
            continue
        if previous is not None:
            if (previous.type == TokenType.VARIABLE
                    and token.type in (TokenType.VARIABLE, TokenType.FUNCTION)):
                text += name_separator
            else:
                text += " "
        text += token.lexeme
        previous = token
    return text
