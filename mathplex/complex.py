import math
import numbers
from dataclasses import dataclass, field

import numpy as np

from .errors import DomainError, InvalidArgument, TypeMismatch
from .parser import parse_components

# ───────────────────────── CONFIGURATION ──────────────────────────────────── #
DECIMALS = 4                                   # places shown for non-integral parts


def transform(value) -> "Complex":
    """Coerce a Complex, real number or ``"a+bi"`` string into a Complex."""
    if isinstance(value, Complex):
        return value
    if isinstance(value, str):
        return Complex.parse(value)
    if isinstance(value, numbers.Real) and not isinstance(value, bool):
        return Complex(value, 0)
    raise TypeMismatch(f"Cannot use {type(value).__name__} as a complex number")


def _exponent(value) -> float:
    exponent = transform(value)
    if exponent.imaginary != 0:
        raise TypeMismatch(f"Exponent must be real, got {exponent}")
    return exponent.real


def _format(part: float) -> str:
    if part == math.floor(part):
        return str(int(part))
    return f"{part:.{DECIMALS}f}"


def _round_half_up(part: float) -> float:
    whole = math.floor(part)
    return float(whole + (part - whole >= 0.5))


@dataclass(frozen=True, repr=False)
class Complex:
    """
    An immutable complex number ``real + imaginary·i``.

    Constructors
    ------------
    Complex(a, b)              -> a + b i      (rectangular, parts default to 0)
    Complex.polar(r, theta)    -> r·e^{iθ}
    Complex.parse("a+bi")      -> a + b i

    ``magnitude`` and ``angle`` (principal argument in (-π, π]) are computed
    once at construction.

    Every operation returns a new value and can be called on an instance,
    ``z.add(w)``, or off the class with any mix of Complex, real and text
    operands, ``Complex.add("3+5i", 2)``; both go through ``transform()``.

    pow, sqrt, root, log and the inverse trig functions return the principal
    branch only.
    """

    real: float = 0.0
    imaginary: float = 0.0
    magnitude: float = field(init=False, compare=False)
    angle: float = field(init=False, compare=False)

    # ---------- construction ----------
    def __post_init__(self):
        try:
            re, im = float(self.real), float(self.imaginary)
        except OverflowError as exc:           # e.g. 10**400
            raise DomainError(f"Parts out of range, got {self.real!r} and {self.imaginary!r}") from exc
        except (TypeError, ValueError) as exc:
            raise TypeMismatch(
                f"Parts must be real numbers, got {self.real!r} and {self.imaginary!r}"
            ) from exc
        if not (math.isfinite(re) and math.isfinite(im)):
            raise DomainError(f"Parts must be finite, got ({re}, {im})")

        # fold -0.0 so atan2 never returns -π and "-0" is never printed
        re, im = re + 0.0, im + 0.0
        magnitude = math.hypot(re, im)

        object.__setattr__(self, "real", re)
        object.__setattr__(self, "imaginary", im)
        object.__setattr__(self, "magnitude", magnitude)
        object.__setattr__(self, "angle", math.atan2(im, re) if magnitude else 0.0)

    # ---------- convenience makers ----------
    @classmethod
    def polar(cls, r: float, theta: float) -> "Complex":
        """Build a value from its magnitude and angle (De Moivre)."""
        return cls(r * math.cos(theta), r * math.sin(theta))

    @classmethod
    def parse(cls, text: str) -> "Complex":
        """Parse ``"a+bi"`` style text, see ``mathplex.parser``."""
        return cls(*parse_components(text))

    @classmethod
    def random(cls, rng: np.random.Generator | None = None) -> "Complex":
        """Both parts drawn uniformly from [0, 1)."""
        if rng is None:
            rng = np.random.default_rng()
        re, im = rng.random(2)
        return cls(float(re), float(im))

    transform = staticmethod(transform)

    # ---------- arithmetic helpers ----------
    def add(self, other) -> "Complex":
        a, b = transform(self), transform(other)
        return Complex(a.real + b.real, a.imaginary + b.imaginary)

    def subtract(self, other) -> "Complex":
        a, b = transform(self), transform(other)
        return Complex(a.real - b.real, a.imaginary - b.imaginary)

    def multiply(self, other) -> "Complex":
        a, b = transform(self), transform(other)
        return Complex(a.real * b.real - a.imaginary * b.imaginary,
                       a.real * b.imaginary + a.imaginary * b.real)

    def divide(self, other) -> "Complex":
        """
        Multiply both sides by the conjugate of the divisor so the
        denominator becomes the real number |other|².

        The divisor is first scaled by its largest part so |other|² stays
        in [1, 2] and cannot under- or overflow.
        """
        a, b = transform(self), transform(other)
        if b.magnitude == 0:
            raise DomainError(f"Cannot divide {a} by zero")
        scale = max(abs(b.real), abs(b.imaginary))
        multiplier = Complex(b.real / scale, -b.imaginary / scale)
        denominator = (b.real / scale) ** 2 + (b.imaginary / scale) ** 2
        numerator = a.multiply(multiplier)
        return Complex(numerator.real / denominator / scale,
                       numerator.imaginary / denominator / scale)

    def negate(self) -> "Complex":
        z = transform(self)
        return Complex(-z.real, -z.imaginary)

    def conjugate(self) -> "Complex":
        z = transform(self)
        return Complex(z.real, -z.imaginary)

    # ---------- rounding & magnitude ----------
    def abs(self) -> float:
        return transform(self).magnitude

    def floor(self) -> "Complex":
        z = transform(self)
        return Complex(math.floor(z.real), math.floor(z.imaginary))

    def ceil(self) -> "Complex":
        z = transform(self)
        return Complex(math.ceil(z.real), math.ceil(z.imaginary))

    def round(self) -> "Complex":
        """Round each part to the nearest integer, halves go up (2.5 -> 3, -2.5 -> -2)."""
        z = transform(self)
        return Complex(_round_half_up(z.real), _round_half_up(z.imaginary))

    def square(self) -> "Complex":
        z = transform(self)
        return Complex(z.real * z.real - z.imaginary * z.imaginary,
                       2 * z.real * z.imaginary)

    # ---------- powers, exp & log ----------
    def pow(self, exponent) -> "Complex":
        """
        Principal value of ``self ** exponent`` for a real exponent:
        the magnitude is raised and the angle scaled.
        """
        z, n = transform(self), _exponent(exponent)
        if z.magnitude == 0 and n < 0:
            raise DomainError(f"Cannot raise zero to the negative power {n:g}")
        try:
            r = z.magnitude ** n
        except OverflowError as exc:
            raise DomainError(f"{z} ** {n:g} is out of range") from exc
        return Complex.polar(r, z.angle * n)

    def sqrt(self) -> "Complex":
        return Complex.pow(self, 0.5)

    def root(self, n) -> "Complex":
        """Principal n-th root."""
        n = _exponent(n)
        if n == 0:
            raise DomainError("The 0th root is undefined")
        return Complex.pow(self, 1 / n)

    def exp(self) -> "Complex":
        z = transform(self)
        if z.imaginary == 0:
            return E.pow(z.real)
        try:
            r = math.exp(z.real)
        except OverflowError as exc:
            raise DomainError(f"exp({z}) is out of range") from exc
        return Complex.polar(r, z.imaginary)

    def log(self) -> "Complex":
        """Principal natural log, branch cut along the negative real axis."""
        z = transform(self)
        if z.magnitude == 0:
            raise DomainError("log(0) is undefined")
        return Complex(math.log(z.magnitude), z.angle)

    # ---------- trigonometry ----------
    # Everything below is built from exp/log so real inputs give the real
    # functions back and complex inputs stay on the same branches.
    @staticmethod
    def _euler(value) -> tuple["Complex", "Complex"]:
        """(e^{zi}, e^{-zi})"""
        zi = transform(value).multiply(I)
        return zi.exp(), zi.negate().exp()

    def sin(self) -> "Complex":
        # sin(z) = (e^{zi} - e^{-zi}) / 2i
        pos, neg = Complex._euler(self)
        return (pos - neg) / Complex(0, 2)

    def cos(self) -> "Complex":
        # cos(z) = (e^{zi} + e^{-zi}) / 2
        pos, neg = Complex._euler(self)
        return (pos + neg) / Complex(2, 0)

    def tan(self) -> "Complex":
        # tan(z) = (e^{zi} - e^{-zi}) / (i(e^{zi} + e^{-zi}))
        pos, neg = Complex._euler(self)
        return (pos - neg) / ((pos + neg) * I)

    def cot(self) -> "Complex":
        # cot(z) = i(e^{zi} + e^{-zi}) / (e^{zi} - e^{-zi})
        pos, neg = Complex._euler(self)
        return I * (pos + neg) / (pos - neg)

    def sec(self) -> "Complex":
        # sec(z) = 2 / (e^{zi} + e^{-zi})
        pos, neg = Complex._euler(self)
        return Complex(2, 0) / (pos + neg)

    def cosec(self) -> "Complex":
        # cosec(z) = 2i / (e^{zi} - e^{-zi})
        pos, neg = Complex._euler(self)
        return Complex(0, 2) / (pos - neg)

    def atan(self) -> "Complex":
        # atan(z) = i/2 · log((i + z) / (i - z))
        z = transform(self)
        return I * ((I + z) / (I - z)).log() / 2

    def asin(self) -> "Complex":
        # asin(z) = -i · log(zi + sqrt(1 - z²))
        z = transform(self)
        return NEG_I * (z * I + (ONE - z.square()).sqrt()).log()

    def acos(self) -> "Complex":
        # acos(z) = i · log(z - i·sqrt(1 - z²))
        z = transform(self)
        return I * (z - I * (ONE - z.square()).sqrt()).log()

    # ---------- extrema ----------
    @staticmethod
    def min(*values) -> "Complex":
        """Smallest magnitude; the first one wins a tie."""
        if not values:
            raise InvalidArgument("min() needs at least one value")
        return min((transform(v) for v in values), key=lambda z: z.magnitude)

    @staticmethod
    def max(*values) -> "Complex":
        """Largest magnitude; the first one wins a tie."""
        if not values:
            raise InvalidArgument("max() needs at least one value")
        return max((transform(v) for v in values), key=lambda z: z.magnitude)

    # ---------- comparison & formatting ----------
    def isclose(self, other, rel_tol: float = 1e-9, abs_tol: float = 1e-12) -> bool:
        a, b = transform(self), transform(other)
        return (math.isclose(a.real, b.real, rel_tol=rel_tol, abs_tol=abs_tol)
                and math.isclose(a.imaginary, b.imaginary, rel_tol=rel_tol, abs_tol=abs_tol))

    def to_string(self) -> str:
        """``"a+bi"`` / ``"a-bi"``; integral parts print without decimals."""
        z = transform(self)
        sign = "+" if z.imaginary >= 0 else ""
        return f"{_format(z.real)}{sign}{_format(z.imaginary)}i"

    # ---------- dunder sugar ----------
    __abs__     = abs
    __add__     = add
    __sub__     = subtract
    __mul__     = multiply
    __truediv__ = divide
    __pow__     = pow
    __neg__     = negate
    __str__     = to_string

    def __radd__(self, other):
        return Complex.add(other, self)

    def __rsub__(self, other):
        return Complex.subtract(other, self)

    def __rmul__(self, other):
        return Complex.multiply(other, self)

    def __rtruediv__(self, other):
        return Complex.divide(other, self)

    # readable REPL / print‑outs
    def __repr__(self):
        return f"Complex({self.real:+g} {self.imaginary:+g}i)"


ZERO  = Complex.ZERO  = Complex(0, 0)
ONE   = Complex.ONE   = Complex(1, 0)
I     = Complex.I     = Complex(0, 1)
NEG_I = Complex.NEG_I = Complex(0, -1)
PI    = Complex.PI    = Complex(math.pi, 0)
E     = Complex.E     = Complex(math.e, 0)

parse = Complex.parse


if __name__ == "__main__":
    z1 = Complex(3, 4)                         # 3 + 4i
    z2 = Complex.polar(2, math.pi / 4)         # 2·e^{iπ/4}
    print(z1.magnitude)                        # 5.0
    print(z1 + z2)                             # vector addition
    print(Complex.add("3+5i", "23-15i"))       # 26-10i
    print(Complex.sin(PI / 2))                 # 1+0i
    print(Complex.exp(I * math.pi))            # ≈ -1+0i
