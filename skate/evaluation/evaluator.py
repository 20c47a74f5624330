"""Core evaluator for the Skate interpreter.

A single synchronous recursive walk. There are no special forms: the head of
a list must evaluate to a Callable and every argument is evaluated, left to
right, before it is invoked. Any error aborts the whole walk.
"""

from __future__ import annotations

import logging

from skate.errors import (
    CannotEvaluateNull,
    EmptyList,
    NestingTooDeep,
    NotCallable,
    UnexpectedCallable,
)
from skate.reader.parser import read_top_level
from skate.types.environment import Environment
from skate.types.expression import (
    Callable,
    Expression,
    Float,
    List,
    Literal,
    NullType,
    Symbol,
)

logger = logging.getLogger(__name__)


def evaluate(expr: Expression, env: Environment) -> Expression:
    """Evaluate `expr` against `env` and return the resulting Expression.

    Python recursion exhaustion on deeply nested lists is reported as
    NestingTooDeep rather than escaping as RecursionError.
    """
    try:
        return evaluate0(expr, env)
    except RecursionError:
        raise NestingTooDeep("evaluate") from None


def evaluate0(expr: Expression, env: Environment) -> Expression:
    """Recursive walk behind evaluate()."""
    match expr:
        case Float() | Literal():
            return expr

        case Symbol(name=name):
            return env.lookup(name)

        case List(items=()):
            raise EmptyList()

        case List(items=(head, *tail)):
            fn = evaluate0(head, env)
            if not isinstance(fn, Callable):
                raise NotCallable(fn.tag)
            args = [evaluate0(arg, env) for arg in tail]
            logger.debug("apply %s to %d argument(s)", fn.name, len(args))
            return fn(args)

        case Callable():
            raise UnexpectedCallable()

        case NullType():
            raise CannotEvaluateNull()

    raise TypeError(f"Not an expression: {expr!r}")


def parse_and_evaluate(source: str, env: Environment, strict: bool = False) -> Expression:
    """Read the first expression in `source` and evaluate it."""
    return evaluate(read_top_level(source, strict), env)
