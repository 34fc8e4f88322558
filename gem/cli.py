#!/usr/bin/env python3
"""
Gem command line tool

Usage:
    gem [FILE] [--strict] [--tokens] [--verbose]
    gem --version

Reads FILE (or stdin when FILE is omitted or '-') and prints the parsed
tree, or the token stream with --tokens.

Exit codes:
    0  success
    1  lexical or syntax error
    2  input could not be read
"""

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .lexer import Lexer, GemError
from .parser import Parser

LOG = logging.getLogger("gem")


def _read_source(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def cmd_tokens(source: str, strict: bool) -> int:
    """Print one token per line."""
    lexer = Lexer(source, strict=strict)
    count = 0
    for token in lexer.tokenize():
        print(token)
        count += 1
    LOG.debug("Scanned %d tokens", count)
    return 0


def cmd_parse(source: str, strict: bool) -> int:
    """Parse and print the rendered tree."""
    lexer = Lexer(source, strict=strict)
    program = Parser(lexer).parse()
    LOG.debug("Parsed %d top-level statements", len(program.statements))
    sys.stdout.write(str(program))
    return 0


def build_arg_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="gem", description="Gem lexer and parser")
    ap.add_argument("file", nargs="?", default="-", help="source file ('-' for stdin)")
    ap.add_argument("--tokens", action="store_true", help="print tokens instead of the tree")
    ap.add_argument("--strict", action="store_true", help="reject malformed input during lexing")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    ap.add_argument("--version", action="version", version=f"gem {__version__}")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    LOG.debug("Verbose mode enabled")

    try:
        source = _read_source(args.file)
    except OSError as e:
        LOG.error("Cannot read %s: %s", args.file, e)
        return 2

    try:
        if args.tokens:
            return cmd_tokens(source, args.strict)
        return cmd_parse(source, args.strict)
    except GemError as e:
        sys.stderr.write(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
