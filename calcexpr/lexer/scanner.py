"""
Character cursor the tokenizer pulls from.
"""

from typing import Callable, Optional


class CharScanner:
    """
    Pull-based cursor over an expression string.

    Besides peek/advance it remembers the first character the tokenizer
    could not classify, so callers can report it after the fact.
    """

    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.unexpected_char: Optional[str] = None
        self.unexpected_position: Optional[int] = None

    @property
    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    @property
    def position(self) -> int:
        return self.pos

    def peek(self) -> Optional[str]:
        """Next character without consuming it, None at end of input."""
        if self.pos < len(self.text):
            return self.text[self.pos]
        return None

    def advance(self) -> Optional[str]:
        """Consume and return the next character, None at end of input."""
        if self.pos >= len(self.text):
            return None
        char = self.text[self.pos]
        self.pos += 1
        return char

    def consume_while(self, predicate: Callable[[str], bool]) -> str:
        """Advance while predicate holds for the next character; return the run."""
        start = self.pos
        while self.pos < len(self.text) and predicate(self.text[self.pos]):
            self.pos += 1
        return self.text[start:self.pos]

    def record_unexpected(self, char: str, position: int):
        # Only the first one is kept
        if self.unexpected_char is None:
            self.unexpected_char = char
            self.unexpected_position = position
