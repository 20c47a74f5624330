# Skate: a tiny Lisp over floats and quoted literals.
#
# Values are the immutable Expression variants in skate.types.expression;
# state lives only in the session Environment. The pipeline is
#   tokenize -> parse -> evaluate
# with parse_and_evaluate composing all three for a line of input.

__version__ = "0.1.0"

from skate.errors import SkateError, SkateEvalError, SkateSyntaxError
from skate.types import Environment, Expression
from skate.reader.parser import parse, read_top_level, tokenize
from skate.evaluation.evaluator import evaluate, parse_and_evaluate
from skate.interpreter import Interpreter
