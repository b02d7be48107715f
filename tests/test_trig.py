"""Trig family checked against numpy's complex ufuncs."""

import math

import numpy as np
import pytest

from mathplex import I, NEG_I, ZERO, Complex, DomainError

POINTS = [0.3 + 0.4j, -1.2 + 0.7j, 2 - 1.5j, 0.5 + 0j, -0.8 - 0.1j]
REALS = np.linspace(-3, 3, 13)


def _as_complex(z: complex) -> Complex:
    return Complex(z.real, z.imag)


def _close(ours: Complex, expected: complex) -> bool:
    return ours.isclose(_as_complex(expected), rel_tol=1e-9, abs_tol=1e-9)


@pytest.mark.parametrize("name, reference", [
    ("sin", np.sin),
    ("cos", np.cos),
    ("tan", np.tan),
    ("cot", lambda z: 1 / np.tan(z)),
    ("sec", lambda z: 1 / np.cos(z)),
    ("cosec", lambda z: 1 / np.sin(z)),
    ("asin", np.arcsin),
    ("acos", np.arccos),
    ("atan", np.arctan),
])
@pytest.mark.parametrize("z", POINTS)
def test_matches_numpy(name, reference, z):
    ours = getattr(Complex, name)(_as_complex(z))
    assert _close(ours, reference(np.complex128(z)))


@pytest.mark.parametrize("x", REALS)
def test_real_inputs_give_real_sine_and_cosine(x):
    s, c = Complex.sin(x), Complex.cos(x)
    assert s.real == pytest.approx(math.sin(x), abs=1e-12)
    assert c.real == pytest.approx(math.cos(x), abs=1e-12)
    assert s.imaginary == pytest.approx(0, abs=1e-12)
    assert c.imaginary == pytest.approx(0, abs=1e-12)


@pytest.mark.parametrize("x", REALS)
def test_pythagorean_identity(x):
    z = Complex(x, 0.5)
    assert (z.sin().square() + z.cos().square()).isclose(Complex(1, 0), abs_tol=1e-9)


def test_trig_at_zero():
    assert Complex.sin(0) == ZERO
    assert Complex.cos(0) == Complex(1, 0)
    assert Complex.tan(0) == ZERO


@pytest.mark.parametrize("x", [-0.9, -0.3, 0.0, 0.6])
def test_inverse_functions_undo_the_forward_ones(x):
    assert Complex.asin(Complex.sin(x)).isclose(Complex(x, 0), abs_tol=1e-9)
    assert Complex.atan(Complex.tan(x)).isclose(Complex(x, 0), abs_tol=1e-9)
    assert Complex.acos(Complex.cos(x + 1.2)).isclose(Complex(x + 1.2, 0), abs_tol=1e-9)


def test_asin_outside_the_unit_interval():
    # sqrt(1 - z²) leaves the real line, sin brings it back
    w = Complex.asin(2)
    assert w.real == pytest.approx(math.pi / 2)
    assert w.sin().isclose(Complex(2, 0), abs_tol=1e-9)


@pytest.mark.parametrize("name", ["cot", "cosec"])
def test_poles_at_zero(name):
    with pytest.raises(DomainError):
        getattr(Complex, name)(0)


@pytest.mark.parametrize("z", [I, NEG_I, "i", "-i"])
def test_atan_poles(z):
    with pytest.raises(DomainError):
        Complex.atan(z)


def test_instance_and_class_calls_agree():
    z = Complex(0.3, -0.2)
    assert z.sin() == Complex.sin(z) == Complex.sin("0.3-0.2i")
