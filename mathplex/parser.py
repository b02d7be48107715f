"""
Text → (real, imaginary) parser for the ``a+bi`` notation.

Accepted forms (whitespace and stray characters are dropped first):

    "2.5+60i"  -> ( 2.5,  60)
    "-2+7i"    -> (-2,    7)
    "3-i"      -> ( 3,   -1)      bare unit means magnitude 1
    "4i"       -> ( 0,    4)      a lone term ending in i is imaginary
    "5"        -> ( 5,    0)
    "3+5"      -> ( 3,    5)      second term is imaginary even without i

Everything else ("", "-", "3+", "1.2.3", "1+2+3i", "2i+3") raises ParseError.
An ``i`` touching another letter ("pi", "hi", "sin(1)") is part of a word,
not the unit marker, and is rejected too, as is a literal too large for a
double ("1" * 400).
"""
import math
import re

from .errors import ParseError

KEEP = set("0123456789+-.i")

_LITERAL = r"(?:\d+(?:\.\d*)?|\.\d+)?"
_PATTERN = re.compile(
    rf"(?P<first_sign>[+-]?)(?P<first>{_LITERAL})(?P<first_unit>i?)"
    rf"(?:(?P<second_sign>[+-])(?P<second>{_LITERAL})(?P<second_unit>i?))?"
)
_WORD_I = re.compile(r"[^\W\d_]i|i[^\W\d_]")


def _signed(sign: str, literal: str, unit: str, text: str) -> float:
    if not literal:
        if not unit:                           # "", "-", "3+"
            raise ParseError(f"Missing number in {text!r}")
        literal = "1"                          # "i", "-i", "3+i"
    value = float(literal)
    if not math.isfinite(value):
        raise ParseError(f"Number out of range in {text!r}")
    return -value if sign == "-" else value


def parse_components(text: str) -> tuple[float, float]:
    """Split ``text`` into its real and imaginary parts."""
    if not isinstance(text, str):
        raise ParseError(f"Expected a string, got {type(text).__name__}")
    if _WORD_I.search(text):
        raise ParseError(f"Unexpected word in {text!r}")

    cleaned = "".join(ch for ch in text if ch in KEEP)
    match = _PATTERN.fullmatch(cleaned)
    if match is None:
        raise ParseError(f"Malformed complex number {text!r}")

    first_sign, first, first_unit = match.group("first_sign", "first", "first_unit")

    if match.group("second_sign") is None:     # single term
        value = _signed(first_sign, first, first_unit, text)
        return (0.0, value) if first_unit else (value, 0.0)

    if first_unit or not first:
        raise ParseError(f"Real part must come first in {text!r}")

    second_sign, second, second_unit = match.group("second_sign", "second", "second_unit")
    return (_signed(first_sign, first, "", text),
            _signed(second_sign, second, second_unit, text))
