"""Expression values for Skate.

Every value the language produces is one of a closed set of immutable
variants. Each variant carries a `tag` naming it for rendering and errors:

    - Symbol   -> SYMBOL   identifier resolved against an Environment
    - Literal  -> LITERAL  self-evaluating quoted atom, written 'name'
    - Float    -> FLOAT    self-evaluating number
    - List     -> LIST     application when evaluated
    - Callable -> FN       builtin operation
    - Null     -> NULL     sentinel returned by side-effect-only builtins

Mutation only ever happens by rebinding names in an Environment.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable as PyCallable, Union

if TYPE_CHECKING:
    from skate.types.environment import Environment


@dataclass(frozen=True, slots=True)
class Symbol:
    name: str
    tag = "SYMBOL"

    def __str__(self):
        return self.name


@dataclass(frozen=True, slots=True)
class Literal:
    text: str
    tag = "LITERAL"

    def __str__(self):
        return self.text


@dataclass(frozen=True, slots=True)
class Float:
    value: float
    tag = "FLOAT"

    def __post_init__(self):
        # Normalise ints so Float(3) == Float(3.0) renders the same way
        object.__setattr__(self, "value", float(self.value))


@dataclass(frozen=True, slots=True)
class List:
    items: tuple[Expression, ...] = ()
    tag = "LIST"

    def __post_init__(self):
        object.__setattr__(self, "items", tuple(self.items))

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)


BuiltinFn = PyCallable[["Environment | None", list[Any]], Any]


@dataclass(frozen=True, slots=True)
class Callable:
    """A builtin operation.

    `fn` is invoked as fn(env, args) where args are already evaluated. `env`
    is the environment handle the builtin needs (None for pure builtins),
    so the capabilities a builtin uses are visible on the value itself.
    """

    name: str
    fn: BuiltinFn
    env: Environment | None = field(default=None, compare=False, repr=False)
    tag = "FN"

    def __call__(self, args: list[Expression]) -> Expression:
        return self.fn(self.env, args)


class NullType:
    __slots__ = ()
    tag = "NULL"

    def __repr__(self):
        return "Null"

    def __bool__(self):
        return False

    def __eq__(self, other):
        return isinstance(other, NullType)

    def __hash__(self):
        return hash(NullType)


Null = NullType()


Expression = Union[Symbol, Literal, Float, List, Callable, NullType]
