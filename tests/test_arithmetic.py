import pytest

from skate import errors
from skate.evaluation.evaluator import parse_and_evaluate
from skate.types.expression import Float


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2)", 3),
        ("(+ 1 2 3)", 6),
        ("(+ 1 2.5 3)", 6.5),
        ("(+)", 0),
        ("(+ 7)", 7),
        ("(+ 0.1 0.2)", 0.1 + 0.2),
        ("(+ 1 (+ 2 (+ 3 4)))", 10),
        # subtraction accumulates from 0
        ("(- 5 2 1)", -8),
        ("(- 5)", -5),
        ("(-)", 0),
        ("(- (- 5))", 5),
        ("(+ 10 (- 3))", 7),
        ("(- 0 (- 5))", 5),
    ]
)
def test_arithmetic(env, source, expected):
    assert parse_and_evaluate(source, env) == Float(expected)


@pytest.mark.parametrize(
    "source",
    [
        "(+ 1 'a')",
        "(- 'a')",
        "(+ 1 +)",
        "(- 1 (env))",
    ]
)
def test_arithmetic_type_mismatch(env, source, capsys):
    with pytest.raises(errors.TypeMismatch) as info:
        parse_and_evaluate(source, env)
    assert info.value.expected == "FLOAT"


def test_type_mismatch_reports_actual_variant(env):
    with pytest.raises(errors.TypeMismatch) as info:
        parse_and_evaluate("(+ 1 'a')", env)
    assert info.value.actual == "LITERAL"
    assert info.value.name == "+"
