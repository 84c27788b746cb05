"""
Nesting counters for function-call argument grouping.

One counter per bracket family plus one for function angle brackets. The
tokenizer uses them to decide whether a comma or ``>`` belongs to the call
being grouped; a parser rebuilding grouping from a flat token list can use
the same discipline.

Author: xwest
"""

from dataclasses import dataclass

from .tokens import TokenType, CLOSING_BRACKETS


@dataclass
class NestingCounters:
    """
    Depth counters for ``<>``, ``()``, ``[]`` and ``{}``.

    Bracket counters never go below zero: closing an unopened bracket is
    clamped and reported back so the caller can drop the token.
    """
    angle: int = 0
    paren: int = 0
    bracket: int = 0
    brace: int = 0

    _FIELDS = {
        TokenType.LEFT_SMALL_PAREN: "paren",
        TokenType.LEFT_MID_PAREN: "bracket",
        TokenType.LEFT_BIG_PAREN: "brace",
    }

    @property
    def inside_brackets(self) -> bool:
        """True while any of (), [] or {} is open."""
        return self.paren > 0 or self.bracket > 0 or self.brace > 0

    @property
    def balanced(self) -> bool:
        return self.angle == 0 and not self.inside_brackets

    def open(self, token_type: TokenType):
        """Count an opening bracket."""
        name = self._FIELDS[token_type]
        setattr(self, name, getattr(self, name) + 1)

    def close(self, token_type: TokenType) -> bool:
        """
        Count a closing bracket.

        Returns False when nothing of that family was open; the counter
        stays at zero in that case.
        """
        name = self._FIELDS[CLOSING_BRACKETS[token_type]]
        depth = getattr(self, name)
        if depth == 0:
            return False
        setattr(self, name, depth - 1)
        return True

    def enter_call(self) -> int:
        self.angle += 1
        return self.angle

    def leave_call(self) -> int:
        self.angle -= 1
        return self.angle
