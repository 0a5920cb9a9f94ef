import math

import pytest

from funcplot.plotting import (
    HEIGHT,
    WIDTH,
    apply_binary,
    apply_unary,
    evaluate_rpn,
    plot_function,
    render_plot,
)

XMIN = 0.0
XMAX = 4 * math.pi


def _lines(postfix, ymin=1.0, ymax=-1.0):
    return render_plot(postfix, XMIN, XMAX, ymin, ymax).splitlines()


def test_unary_minus_negates():
    assert apply_unary("~", 2.5) == -2.5


def test_sin_of_zero():
    assert apply_unary("sin", 0.0) == 0.0


@pytest.mark.parametrize("a", [0.3, 1.1, 2.0])
def test_ctg_is_reciprocal_of_tan(a):
    assert apply_unary("ctg", a) * apply_unary("tan", a) == pytest.approx(1.0)


def test_ctg_of_zero_is_infinite():
    assert abs(apply_unary("ctg", 0.0)) == math.inf


@pytest.mark.parametrize(("op", "a"), [("sqrt", -1.0), ("ln", 0.0), ("ln", -2.0), ("foo", 1.0)])
def test_unary_outside_domain_is_nan(op, a):
    assert str(apply_unary(op, a)) == "nan"


@pytest.mark.parametrize("op", ["sin", "cos", "tan", "ctg"])
def test_trig_of_infinity_is_nan(op):
    assert math.isnan(apply_unary(op, math.inf))


@pytest.mark.parametrize(("a", "b"), [(2.0, 3.0), (-7.5, 4.0), (0.0, 11.0)])
def test_add_then_subtract_round_trips(a, b):
    assert apply_binary("-", apply_binary("+", a, b), b) == a


@pytest.mark.parametrize(("a", "b"), [(2.0, 3.0), (-7.5, 4.0)])
def test_multiply_then_divide_round_trips(a, b):
    assert apply_binary("/", apply_binary("*", a, b), b) == a
    assert apply_binary("*", a, b) == apply_binary("*", b, a)


@pytest.mark.parametrize("op", ["%", "^", "("])
def test_binary_unknown_operator_is_nan(op):
    assert str(apply_binary(op, 1.0, 2.0)) == "nan"


def test_division_by_zero_is_nan():
    assert str(apply_binary("/", 1.0, 0.0)) == "nan"


def test_evaluate_variable():
    assert evaluate_rpn("x", 0.5) == 0.5


def test_evaluate_sum_of_constants():
    assert evaluate_rpn("2 3 +", 0.0) == 5.0


def test_evaluate_sqrt():
    assert evaluate_rpn("x sqrt", 4.0) == 2.0


def test_variable_keeps_ten_significant_digits():
    assert evaluate_rpn("x", 1 / 3) == 0.3333333333


def test_evaluate_negation():
    assert evaluate_rpn("x ~", 3.0) == -3.0


def test_evaluate_empty_is_nan():
    assert str(evaluate_rpn("", 1.0)) == "nan"


def test_evaluate_division_by_zero_is_nan():
    assert str(evaluate_rpn("x 0 /", 1.0)) == "nan"


def test_plot_has_fixed_size():
    lines = _lines("x sin")
    assert len(lines) == HEIGHT
    assert all(len(line) == WIDTH for line in lines)
    assert set("".join(lines)) <= {".", "*"}


def test_constant_at_ymin_fills_first_row():
    lines = _lines("1")
    assert lines[0] == "*" * WIDTH
    assert all("*" not in line for line in lines[1:])


def test_constant_in_middle_fills_middle_row():
    lines = _lines("0")
    middle = HEIGHT // 2
    assert lines[middle] == "*" * WIDTH
    assert sum(line.count("*") for line in lines) == WIDTH


def test_out_of_range_values_are_not_drawn():
    lines = _lines("x 0 /")
    assert all(line == "." * WIDTH for line in lines)


def test_at_most_one_mark_per_column():
    lines = _lines("x sin")
    for col in range(WIDTH):
        assert sum(line[col] == "*" for line in lines) <= 1


def test_sine_starts_in_middle_row():
    lines = _lines("x sin")
    assert lines[HEIGHT // 2][0] == "*"


def test_zero_height_range_draws_nothing():
    lines = _lines("1", ymin=1.0, ymax=1.0)
    assert all("*" not in line for line in lines)


def test_plot_function_prints_render(capsys):
    plot_function("x cos", XMIN, XMAX, 1.0, -1.0)
    assert capsys.readouterr().out == render_plot("x cos", XMIN, XMAX, 1.0, -1.0)