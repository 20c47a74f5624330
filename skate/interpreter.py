from __future__ import annotations

import logging
from pathlib import Path

from skate.builtin.env_builtin import register
from skate.evaluation.evaluator import evaluate, parse_and_evaluate
from skate.reader.parser import read_all
from skate.types.environment import Environment
from skate.types.expression import Expression, Null

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Owns the session Environment, seeded once with the builtins, and
    evaluates source text against it. Definitions persist across calls.
    """

    def __init__(self, strict: bool = False, env: Environment | None = None):
        self.strict = strict
        self.env: Environment = env if env is not None else Environment()
        register(self.env)

    def eval(self, code: str) -> Expression:
        """Evaluate the first expression in `code`."""
        return parse_and_evaluate(code, self.env, self.strict)

    def eval_all(self, code: str) -> list[Expression]:
        """Evaluate every expression in `code`, in order."""
        return [evaluate(expr, self.env) for expr in read_all(code)]

    def load(self, path: str | Path) -> Expression:
        """Evaluate a source file, returning the last result (Null if empty)."""
        p = Path(path)
        logger.info("loading %s", p)
        result: Expression = Null
        for expr in read_all(p.read_text(encoding="utf-8")):
            result = evaluate(expr, self.env)
        return result
