"""
Tests for the gem command line tool.

Author: xwest
"""

import unittest
import sys
import os
import io
import tempfile
from contextlib import redirect_stdout, redirect_stderr

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from gem.cli import main


class TestCli(unittest.TestCase):

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()

    def tearDown(self):
        self.tmpdir.cleanup()

    def _write(self, source: str) -> str:
        path = os.path.join(self.tmpdir.name, "program.gem")
        with open(path, "w", encoding="utf-8") as f:
            f.write(source)
        return path

    def _run(self, argv):
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            code = main(argv)
        return code, out.getvalue(), err.getvalue()

    def test_prints_tree(self):
        path = self._write("func add(x, y) { x + y }\nvar z;")
        code, out, _ = self._run([path])
        self.assertEqual(code, 0)
        self.assertEqual(out, "function add(x, y) {\n    (x + y)\n}\n\nvariable z(0)\n\n")

    def test_prints_tokens(self):
        path = self._write("var y = 3.14;")
        code, out, _ = self._run(["--tokens", path])
        self.assertEqual(code, 0)
        self.assertEqual(out.splitlines(), [
            "VAR", "IDENTIFIER('y')", "ASSIGN", "NUMBER(3.14)", "SEMICOLON", "EOF",
        ])

    def test_syntax_error_exit_code(self):
        path = self._write("func (x) {}")
        code, out, err = self._run([path])
        self.assertEqual(code, 1)
        self.assertEqual(out, "")
        self.assertIn("ERROR[P002]", err)

    def test_strict_flag(self):
        path = self._write("var x = 1 @ 2;")
        code, _, err = self._run(["--strict", path])
        self.assertEqual(code, 1)
        self.assertIn("ERROR[L001]", err)

    def test_missing_file(self):
        code, _, _ = self._run([os.path.join(self.tmpdir.name, "missing.gem")])
        self.assertEqual(code, 2)

    def test_version(self):
        with self.assertRaises(SystemExit) as ctx:
            self._run(["--version"])
        self.assertEqual(ctx.exception.code, 0)


if __name__ == '__main__':
    unittest.main()
