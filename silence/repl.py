"""Command line driver for Silence.

    silence              start the REPL (same as -r)
    silence -e CODE      evaluate CODE
    silence -ep CODE     evaluate CODE and print its value
    silence -f FILE      evaluate the contents of FILE
    silence -fp FILE     evaluate the contents of FILE and print its value
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence, TextIO

from silence.errors import SilenceError
from silence.interpreter import Interpreter
from silence.log import get_logger, setup_logging
from silence.modules.source_loader import read_source
from silence.types.expression import show_expr

logger = get_logger(__name__)

PROMPT = "𝝺 "


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="silence", description="Silence Lisp interpreter")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("-r", dest="repl", action="store_true", help="start an interactive REPL (default)")
    mode.add_argument("-e", dest="code", metavar="CODE", help="evaluate CODE")
    mode.add_argument("-ep", dest="code_print", metavar="CODE", help="evaluate CODE and print the result")
    mode.add_argument("-f", dest="file", metavar="FILE", help="evaluate FILE")
    mode.add_argument("-fp", dest="file_print", metavar="FILE", help="evaluate FILE and print the result")
    parser.add_argument("--prelude", action="store_true", help="load the core prelude first")
    parser.add_argument("--log-level", default=None, help="logging level (default: SILENCE_LOG_LEVEL or WARNING)")
    return parser


def run_program(interp: Interpreter, code: str, show: bool, out: Optional[TextIO] = None) -> int:
    """Evaluate a whole program; report failures on stderr with exit status 1."""
    try:
        result = interp.eval(code)
    except SilenceError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    except RecursionError:
        print("error: maximum recursion depth exceeded", file=sys.stderr)
        return 1
    if show:
        print(show_expr(result), file=out or sys.stdout)
    return 0


def terminal_repl(interp: Interpreter, prompt: str = PROMPT) -> int:
    """Read-eval-print loop; failures are printed and the loop continues."""
    while True:
        try:
            line = input(prompt)
        except EOFError:
            print()
            return 0
        except KeyboardInterrupt:
            print()
            continue
        if not line.strip():
            continue
        try:
            result = interp.eval(line)
        except SilenceError as e:
            print(f"error: {e}")
            continue
        except RecursionError:
            print("error: maximum recursion depth exceeded")
            continue
        print(show_expr(result))


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)
    interp = Interpreter(prelude=args.prelude)

    if args.code is not None:
        return run_program(interp, args.code, show=False)
    if args.code_print is not None:
        return run_program(interp, args.code_print, show=True)
    for path, show in ((args.file, False), (args.file_print, True)):
        if path is not None:
            try:
                code = read_source(Path(path))
            except SilenceError as e:
                print(f"error: {e}", file=sys.stderr)
                return 1
            return run_program(interp, code, show=show)

    logger.info("Starting REPL")
    return terminal_repl(interp)
