from __future__ import annotations

import sys
from pathlib import Path

from silence import Expression
from silence.builtin.env_builtin import register
from silence.config import get_recursion_limit
from silence.evaluation.evaluator import evaluate, evaluate_all
from silence.log import get_logger
from silence.modules.source_loader import load_prelude, read_source
from silence.reader.parser import parse_all
from silence.types.environment import EnvironmentStack

logger = get_logger(__name__)


class Interpreter:
    """
    Orchestrates reading and evaluating Silence code.
    Owns the process-lifetime global stack, seeded once with the primitives,
    so definitions persist across calls.
    """

    def __init__(self, prelude: bool = False, recursion_limit: int | None = None):
        self.stack: EnvironmentStack = EnvironmentStack()
        register(self.stack)

        # Evaluation is recursive descent; deep programs need head room
        limit = recursion_limit or get_recursion_limit()
        if sys.getrecursionlimit() < limit:
            sys.setrecursionlimit(limit)

        if prelude:
            try:
                load_prelude(self.stack)
            except FileNotFoundError:
                # Be permissive: no prelude found -> proceed
                logger.warning("Prelude requested but not found; continuing without it")

    def evaluate(self, expr: Expression) -> Expression:
        """Evaluate a single parsed expression in the global stack."""
        return evaluate(expr, self.stack)

    def eval(self, code: str) -> Expression:
        """Evaluate every expression in `code`; the program's value is the last one."""
        return evaluate_all(parse_all(code), self.stack)

    def eval_file(self, path: str | Path) -> Expression:
        return self.eval(read_source(Path(path)))
