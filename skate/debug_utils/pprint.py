from __future__ import annotations

import math

from skate.types.expression import Callable, Expression, Float, List, NullType

# ----------------- ANSI colors -----------------
RESET = "\033[0m"
COLOR_TAG = "\033[90m"
COLOR_FLOAT = "\033[94m"
COLOR_LITERAL = "\033[92m"
COLOR_FN = "\033[95m"
COLOR_ERROR = "\033[91m"

TAG_COLORS = {
    "FLOAT": COLOR_FLOAT,
    "LITERAL": COLOR_LITERAL,
    "FN": COLOR_FN,
}

ELIDED = "..."


def format_float(value: float) -> str:
    """Integral floats print without a fraction: 3.0 -> '3'."""
    if math.isfinite(value) and value.is_integer():
        return str(int(value))
    return repr(value)


def format_value(expr: Expression) -> str:
    """Render the payload of an expression, without its tag."""
    if isinstance(expr, Float):
        return format_float(expr.value)
    if isinstance(expr, List):
        return "[" + ", ".join(format_expr(x) for x in expr.items) + "]"
    if isinstance(expr, Callable):
        return ELIDED
    if isinstance(expr, NullType):
        return "null"
    return str(expr)


def colorize(text: str, tag: str, color: bool = False) -> str:
    if not color or tag not in TAG_COLORS:
        return text
    return f"{TAG_COLORS[tag]}{text}{RESET}"


def format_expr(expr: Expression, color: bool = False) -> str:
    """Render an expression as '(TAG, value)', e.g. (FLOAT, 3)."""
    tag = f"{COLOR_TAG}{expr.tag}{RESET}" if color else expr.tag
    return f"({tag}, {colorize(format_value(expr), expr.tag, color)})"


def format_binding(name: str, expr: Expression, color: bool = False) -> str:
    """One line of the `env` listing: 'name = (TAG, value)'."""
    return f"{name} = {format_expr(expr, color)}"


def format_error(err: Exception, color: bool = False) -> str:
    text = f"Error: {type(err).__name__}: {err}"
    return f"{COLOR_ERROR}{text}{RESET}" if color else text
