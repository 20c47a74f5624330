"""Runtime environment for Skate.

The Environment stores bindings of names to Expressions. A session has exactly
one; the interpreter creates it before the first evaluation and hands the same
instance to `evaluate` and to every builtin that needs to read or mutate it.
"""

from __future__ import annotations

import logging
from io import StringIO
from typing import Iterator, Mapping

from skate.errors import UnboundSymbol
from skate.types.expression import Expression

logger = logging.getLogger(__name__)


class Environment:
    """Flat mapping from names to Expressions.

    NOTE: There is no locking. If the interpreter is ever driven from more
    than one thread, lookups and binds must be serialized by the caller.
    """

    __slots__ = ("vars",)

    def __init__(self, bindings: Mapping[str, Expression] | None = None):
        self.vars: dict[str, Expression] = dict(bindings) if bindings else {}

    def lookup(self, name: str) -> Expression:
        """Look up the value bound to `name`. Raises UnboundSymbol if absent."""
        try:
            return self.vars[name]
        except KeyError:
            raise UnboundSymbol(name) from None

    def bind(self, name: str, value: Expression) -> None:
        """Bind `name` to `value`, overwriting any existing binding."""
        logger.debug("bind %s = %r", name, value)
        self.vars[name] = value

    def update(self, mapping: Mapping[str, Expression]) -> None:
        """Bulk-bind a mapping of name -> value."""
        for k, v in mapping.items():
            self.bind(k, v)

    def items(self) -> Iterator[tuple[str, Expression]]:
        # Snapshot so builtins may bind while a listing is in progress
        return iter(list(self.vars.items()))

    def __contains__(self, name: object) -> bool:
        return name in self.vars

    def __len__(self) -> int:
        return len(self.vars)

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("{")
            first = True
            for k, v in self.vars.items():
                if not first:
                    buffer.write(", ")
                buffer.write(f"{k}: {v!r}")
                first = False
            buffer.write("}")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Environment {len(self.vars)} bindings>"
