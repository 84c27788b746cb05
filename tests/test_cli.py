"""
Tests for the calcexpr-tokens command line tool.

Author: xwest
"""

import unittest
import sys
import os
import io
import json
import tempfile
from contextlib import redirect_stdout, redirect_stderr

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from calcexpr.cli import main, dump_tokens


class TestCli(unittest.TestCase):

    def _run(self, argv):
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            code = main(argv)
        return code, out.getvalue(), err.getvalue()

    def test_rendered_tokens(self):
        code, out, _ = self._run(["1 + 2 * 3"])
        self.assertEqual(code, 0)
        self.assertEqual(out, "1 + 2 × 3 EOF\n")

    def test_function(self):
        code, out, _ = self._run(["nvl<abs<x>,0>"])
        self.assertEqual(code, 0)
        self.assertEqual(out, "nvl<abs<x>,0> EOF\n")

    def test_json(self):
        code, out, _ = self._run(["--json", "nvl<1,0>"])
        self.assertEqual(code, 0)
        state = json.loads(out)
        self.assertEqual(state["original_expression"], "nvl<1,0>")
        self.assertEqual(state["tokens"][0]["Function"]["function_prefix"], "nvl")

    def test_unexpected_character(self):
        code, out, err = self._run(["1 + #"])
        self.assertEqual(code, 1)
        self.assertEqual(out, "")
        self.assertIn("Unexpected character: '#'", err)

    def test_file(self):
        with tempfile.NamedTemporaryFile('w', suffix='.txt', delete=False, encoding='utf-8') as f:
            f.write("x ^ 2\n")
            path = f.name
        try:
            code, out, _ = self._run(["-f", path])
        finally:
            os.unlink(path)
        self.assertEqual(code, 0)
        self.assertEqual(out, "x ^ 2 EOF\n")

    def test_missing_file(self):
        code, _, err = self._run(["-f", os.path.join(tempfile.gettempdir(), "no-such-expression.txt")])
        self.assertEqual(code, 1)
        self.assertIn("Cannot read", err)

    def test_no_input(self):
        with redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit):
                main([])

    def test_dump_tokens(self):
        self.assertEqual(dump_tokens("a - b"), "a - b EOF")


if __name__ == '__main__':
    unittest.main()
