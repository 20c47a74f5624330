from skate.types.expression import (
    Callable,
    Expression,
    Float,
    List,
    Literal,
    Null,
    NullType,
    Symbol,
)
from skate.types.environment import Environment
