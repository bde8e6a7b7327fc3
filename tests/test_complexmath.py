import cmath
import math

import pytest

from rsbench.complexmath import c_div, c_mul, fast_cexp, fast_exp, fast_nuclear_w


@pytest.mark.parametrize(
    "a,b",
    [(1 + 2j, 3 - 4j), (-0.5 + 0.25j, 2 + 7j), (3 + 0j, 0 + 1j)],
)
def test_c_mul_agrees_with_builtin(a, b):
    assert c_mul(a, b) == pytest.approx(a * b)


@pytest.mark.parametrize(
    "a,b",
    [(1 + 2j, 3 - 4j), (-0.5 + 0.25j, 2 + 7j), (5 - 1j, 0.1 + 0.2j)],
)
def test_c_div_inverts_c_mul(a, b):
    assert c_div(c_mul(a, b), b) == pytest.approx(a)


def test_c_div_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        c_div(1 + 1j, 0j)


def test_fast_exp_of_zero_is_one():
    assert fast_exp(0.0) == 1.0


@pytest.mark.parametrize("x", [-2.0, -1.0, -0.1, 0.5, 1.0, 2.0])
def test_fast_exp_close_to_exp(x):
    assert fast_exp(x) == pytest.approx(math.exp(x), rel=1e-2)


def test_fast_cexp_of_zero():
    assert fast_cexp(0j) == 1 + 0j


@pytest.mark.parametrize("y", [0.3, 1.0, 2.5, -4.0])
def test_fast_cexp_unit_circle(y):
    assert abs(fast_cexp(complex(0.0, y))) == pytest.approx(1.0)


@pytest.mark.parametrize("z", [0.5 + 0.25j, -1.0 + 2.0j, 1.5 - 0.5j])
def test_fast_cexp_close_to_cexp(z):
    assert fast_cexp(z) == pytest.approx(cmath.exp(z), rel=1e-2)


def test_w_near_origin_is_about_one():
    assert fast_nuclear_w(0.001 + 0.001j) == pytest.approx(1.0, abs=1e-2)


def test_w_on_imaginary_axis():
    assert fast_nuclear_w(1j) == pytest.approx(0.4275836, abs=2e-3)


def test_w_asymptotic_on_real_axis():
    w = fast_nuclear_w(7.0)
    assert w.real == 0.0
    assert w.imag == pytest.approx(1.0 / (math.sqrt(math.pi) * 7.0), rel=2e-2)


@pytest.mark.parametrize("z", [0.5 + 0.7j, 2.0 + 1.0j, 8.0 + 3.0j, 30.0 + 150.0j])
def test_w_reflection_symmetry(z):
    mirrored = fast_nuclear_w(-z.conjugate())
    assert mirrored == pytest.approx(fast_nuclear_w(z).conjugate())