from .complex import E, I, NEG_I, ONE, PI, ZERO, Complex, parse, transform
from .errors import DomainError, InvalidArgument, MathplexError, ParseError, TypeMismatch

__all__ = [
    "Complex", "parse", "transform",
    "ZERO", "ONE", "I", "NEG_I", "PI", "E",
    "MathplexError", "TypeMismatch", "ParseError", "DomainError", "InvalidArgument",
]
