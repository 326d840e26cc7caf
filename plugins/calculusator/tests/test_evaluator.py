import pytest
import sympy as sp

from plugins.calculusator.core import EvalError, Number, Symbolic, SympyEvaluator
from plugins.calculusator.core.evaluator import GLOBAL_DICT


@pytest.fixture
def evaluator() -> SympyEvaluator:
    return SympyEvaluator()


def test_integer_arithmetic_stays_exact(evaluator):
    assert evaluator.evaluate("2+3*4") == Number(14)
    assert evaluator.evaluate("2^10") == Number(1024)
    assert evaluator.evaluate("5!") == Number(120)
    assert evaluator.evaluate("7%3") == Number(1)


def test_fractions_become_floats(evaluator):
    value = evaluator.evaluate("1/4")
    assert isinstance(value, Number)
    assert value.value == pytest.approx(0.25)


def test_calculator_vocabulary(evaluator):
    assert evaluator.evaluate("sqrt(16)") == Number(4)
    assert evaluator.evaluate("sin(pi/2)") == Number(1)
    assert evaluator.evaluate("ln(e)") == Number(1)
    assert evaluator.evaluate("combinations(5, 2)") == Number(10)
    assert evaluator.evaluate("permutations(5, 2)") == Number(20)
    assert evaluator.evaluate("abs(-3)") == Number(3)
    assert evaluator.evaluate("ceil(2.1)") == Number(3)
    assert evaluator.evaluate("floor(2.9)") == Number(2)
    assert evaluator.evaluate("log10(1000)").value == pytest.approx(3.0)
    assert evaluator.evaluate("log2(8)").value == pytest.approx(3.0)
    assert evaluator.evaluate("cbrt(27)").value == pytest.approx(3.0)
    assert evaluator.evaluate("exp(1)").value == pytest.approx(2.718281828459045)


def test_complex_results_are_symbolic(evaluator):
    value = evaluator.evaluate("sqrt(-4)")
    assert isinstance(value, Symbolic)
    assert value.expr.has(sp.I)


def test_undefined_symbol(evaluator):
    with pytest.raises(EvalError, match="Undefined symbol x"):
        evaluator.evaluate("x+1")


def test_division_by_zero_is_not_finite(evaluator):
    with pytest.raises(EvalError, match="not finite"):
        evaluator.evaluate("1/0")


@pytest.mark.parametrize(
    ("expression", "message"),
    [
        ("", "Expression is required"),
        ("   ", "Expression is required"),
        ("1" * 1025, "too long"),
        ("2 & 3", "Unsupported character"),
        ("__import__(1)", "__"),
        ("pi.evalf", "Attribute access"),
    ],
)
def test_guard_rejects_input(evaluator, expression, message):
    with pytest.raises(EvalError, match=message):
        evaluator.evaluate(expression)


def test_malformed_syntax_is_wrapped(evaluator):
    with pytest.raises(EvalError):
        evaluator.evaluate("2+")
    with pytest.raises(EvalError):
        evaluator.evaluate("(2+3")


def test_bare_function_name_is_rejected(evaluator):
    with pytest.raises(EvalError):
        evaluator.evaluate("sin")


def test_derivative_of_polynomial(evaluator):
    x = sp.Symbol("x")
    assert evaluator.derivative("x^2", "x").expr == 2 * x
    assert evaluator.derivative("x^3", "x").expr == 3 * x**2


def test_derivative_of_trig(evaluator):
    x = sp.Symbol("x")
    assert evaluator.derivative("sin(x)", "x").expr == sp.cos(x)


def test_derivative_in_other_variable(evaluator):
    t = sp.Symbol("t")
    assert evaluator.derivative("t^2+3*t", "t").expr == 2 * t + 3


def test_derivative_variable_shadows_constant(evaluator):
    e = sp.Symbol("e")
    assert evaluator.derivative("e^2", "e").expr == 2 * e


def test_derivative_rejects_invalid_variable(evaluator):
    with pytest.raises(EvalError, match="Invalid variable"):
        evaluator.derivative("x^2", "1x")


def test_derivative_of_malformed_expression(evaluator):
    with pytest.raises(EvalError):
        evaluator.derivative("x^", "x")


@pytest.mark.parametrize("expression", ["test()", "preview(x)", "Integer(3)", "pi(2)", "foo(1)"])
def test_only_calculator_functions_can_be_called(evaluator, expression):
    with pytest.raises(EvalError, match="is not allowed"):
        evaluator.evaluate(expression)


def test_sympy_namespace_is_not_reachable(evaluator, monkeypatch):
    calls = []
    monkeypatch.setattr(sp, "test", lambda *args, **kwargs: calls.append(args))
    monkeypatch.setattr(sp, "preview", lambda *args, **kwargs: calls.append(args))
    for expression in ("test()", "preview(x)"):
        with pytest.raises(EvalError):
            evaluator.evaluate(expression)
    assert calls == []
    assert "test" not in GLOBAL_DICT
    assert "preview" not in GLOBAL_DICT


def test_float_overflow_is_not_finite(evaluator):
    with pytest.raises(EvalError, match="not finite"):
        evaluator.evaluate("exp(1000)")


def test_derivative_of_non_finite_expression(evaluator):
    with pytest.raises(EvalError, match="not finite"):
        evaluator.derivative("1/0*x", "x")


def test_derivative_variable_cannot_be_called(evaluator):
    with pytest.raises(EvalError, match="Function 'x' is not allowed"):
        evaluator.derivative("x(2)", "x")
