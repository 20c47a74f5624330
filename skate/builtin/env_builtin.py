"""Built-in functions for the Skate runtime environment.

Every builtin has the signature fn(env, args) where `args` is the list of
already-evaluated argument Expressions. Builtins that need the shared
environment are registered with it; the rest are registered with None.
"""
from __future__ import annotations

import math

from skate.errors import ArityMismatch, ExitRequested, TypeMismatch
from skate.evaluation.evaluator import evaluate
from skate.debug_utils.pprint import format_binding
from skate.types.environment import Environment
from skate.types.expression import Callable, Expression, Float, Literal, Null


def expect(expr: Expression, variant: type, name: str | None = None):
    """Return `expr` if it is an instance of `variant`, else raise TypeMismatch."""
    if not isinstance(expr, variant):
        raise TypeMismatch(variant.tag, expr.tag, name)
    return expr


def expect_arity(name: str, args: list[Expression], n: int) -> None:
    if len(args) != n:
        raise ArityMismatch(name, str(n), len(args))


# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment | None, args: list[Expression]) -> Float:
    """Return the sum of all arguments; (+) is 0."""
    floats = [expect(a, Float, "+") for a in args]
    return Float(sum(f.value for f in floats))


def sub(env: Environment | None, args: list[Expression]) -> Float:
    """Subtract every argument, in order, from 0.

    (- 5) is -5 and (- 5 2 1) is -8; there is no special first operand.
    """
    floats = [expect(a, Float, "-") for a in args]
    result = 0.0
    for f in floats:
        result -= f.value
    return Float(result)


# -------------------------------
# Environment
# -------------------------------
def define(env: Environment, args: list[Expression]) -> Expression:
    """(def 'name' value): bind name to value and return value.

    Both arguments are validated before anything is bound.
    """
    expect_arity("def", args, 2)
    name_expr, value = args
    name = expect(name_expr, Literal, "def")
    env.bind(name.text, value)
    return value


def echo(env: Environment, args: list[Expression]) -> Expression:
    """Evaluate the (already evaluated) argument once more."""
    expect_arity("echo", args, 1)
    return evaluate(args[0], env)


def dump_env(env: Environment, args: list[Expression]) -> Expression:
    """Print every binding as 'name = (TAG, value)'. Returns Null."""
    for name, expr in env.items():
        print(format_binding(name, expr))
    return Null


# -------------------------------
# Session
# -------------------------------
def exit_session(env: Environment | None, args: list[Expression]) -> Expression:
    """(exit) or (exit status): stop the driver loop."""
    if len(args) > 1:
        raise ArityMismatch("exit", "0 or 1", len(args))
    status = 0
    if args:
        value = expect(args[0], Float, "exit").value
        status = int(value) if math.isfinite(value) else 1
    raise ExitRequested(status)


# -------------------------------
# Registration
# -------------------------------
def register(env: Environment) -> None:
    env.update({
        "+": Callable("+", add),
        "-": Callable("-", sub),
        "def": Callable("def", define, env),
        "echo": Callable("echo", echo, env),
        "env": Callable("env", dump_env, env),
        "exit": Callable("exit", exit_session),
    })
