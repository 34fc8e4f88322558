#!/usr/bin/env python3
"""
Main test runner for the Gem front end tests.

Runs a quick lex/parse smoke check, then the unittest suites in tests/.

Author: xwest
"""

import sys
import os
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, project_root)


SMOKE_SOURCE = """
    var x = "Hello, From x!";
    var y = 3.14;

    func add(x, y) {
        x + y;
    }

    func foo(z, x) {
        var w = 12;

        z * add(x, z);
    }

    func main() {
        foo(bar, 12);
    }
"""


def run_smoke_test() -> bool:
    """Push the sample program through the whole pipeline."""
    print("🚀 Gem Front End Test Suite")
    print("=" * 60)

    try:
        from gem.lexer import Lexer
        from gem.parser import Parser
        print("✅ All front end modules imported successfully")
    except ImportError as e:
        print(f"❌ Failed to import front end modules: {e}")
        return False

    print("Testing lex/parse pipeline...")
    try:
        tokens = Lexer(SMOKE_SOURCE).tokenize()
        print(f"     Generated {len(tokens)} tokens")

        program = Parser(Lexer(SMOKE_SOURCE)).parse()
        print(f"     Generated AST with {len(program.statements)} top-level statements")
    except Exception as e:
        print(f"❌ Pipeline test FAILED: {e}")
        return False

    print("-" * 40)
    print(str(program), end="")
    print("-" * 40)
    print()
    return True


def run_all_tests() -> bool:
    """Run the smoke check and every unittest suite."""
    if not run_smoke_test():
        return False

    suite = unittest.defaultTestLoader.discover(os.path.join(project_root, "tests"))
    result = unittest.TextTestRunner(verbosity=1).run(suite)
    return result.wasSuccessful()


if __name__ == "__main__":
    success = run_all_tests()
    sys.exit(0 if success else 1)
