"""
Tests for the character scanner and the nesting counters.

Author: xwest
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from calcexpr.lexer.scanner import CharScanner
from calcexpr.lexer.nesting import NestingCounters
from calcexpr.lexer.tokens import TokenType


class TestCharScanner(unittest.TestCase):
    """peek/advance/consume_while."""

    def test_peek_does_not_consume(self):
        scanner = CharScanner("ab")
        self.assertEqual(scanner.peek(), "a")
        self.assertEqual(scanner.peek(), "a")
        self.assertEqual(scanner.position, 0)

    def test_advance(self):
        scanner = CharScanner("ab")
        self.assertEqual(scanner.advance(), "a")
        self.assertEqual(scanner.advance(), "b")
        self.assertTrue(scanner.at_end)
        self.assertIsNone(scanner.advance())
        self.assertIsNone(scanner.peek())

    def test_consume_while(self):
        scanner = CharScanner("123+4")
        self.assertEqual(scanner.consume_while(str.isdigit), "123")
        self.assertEqual(scanner.peek(), "+")
        self.assertEqual(scanner.consume_while(str.isdigit), "")
        self.assertEqual(scanner.position, 3)

    def test_consume_while_to_end(self):
        scanner = CharScanner("   ")
        self.assertEqual(scanner.consume_while(str.isspace), "   ")
        self.assertTrue(scanner.at_end)

    def test_first_unexpected_character_is_kept(self):
        scanner = CharScanner("#$")
        self.assertIsNone(scanner.unexpected_char)
        scanner.record_unexpected("#", 0)
        scanner.record_unexpected("$", 1)
        self.assertEqual(scanner.unexpected_char, "#")
        self.assertEqual(scanner.unexpected_position, 0)


class TestNestingCounters(unittest.TestCase):
    """Depth counting with clamp-at-zero closers."""

    def test_open_and_close(self):
        counters = NestingCounters()
        counters.open(TokenType.LEFT_SMALL_PAREN)
        counters.open(TokenType.LEFT_MID_PAREN)
        self.assertTrue(counters.inside_brackets)
        self.assertTrue(counters.close(TokenType.RIGHT_MID_PAREN))
        self.assertTrue(counters.close(TokenType.RIGHT_SMALL_PAREN))
        self.assertFalse(counters.inside_brackets)
        self.assertTrue(counters.balanced)

    def test_close_without_open_is_clamped(self):
        counters = NestingCounters()
        self.assertFalse(counters.close(TokenType.RIGHT_BIG_PAREN))
        self.assertEqual(counters.brace, 0)

    def test_families_are_independent(self):
        counters = NestingCounters()
        counters.open(TokenType.LEFT_BIG_PAREN)
        self.assertFalse(counters.close(TokenType.RIGHT_SMALL_PAREN))
        self.assertEqual(counters.brace, 1)

    def test_angle(self):
        counters = NestingCounters(angle=1)
        self.assertFalse(counters.balanced)
        self.assertEqual(counters.enter_call(), 2)
        self.assertEqual(counters.leave_call(), 1)
        self.assertEqual(counters.leave_call(), 0)
        self.assertTrue(counters.balanced)


if __name__ == '__main__':
    unittest.main()
