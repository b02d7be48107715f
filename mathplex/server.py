#!/usr/bin/env python3
"""
----------------------------------
Complex-number calculator over HTTP.
----------------------------------
This service:
▪ Receives HTTP POSTs with a JSON body
      {"operation": "add", "first": "3+5i", "second": "23-15i"}
▪ Coerces both operands (text, numbers) into Complex values
▪ Binary keys   add sub mul div min max pow root   use first and second
▪ Unary keys    negate abs floor ceil round square sqrt log exp
                sin cos tan cot sec cosec asin acos atan   use first only
▪ Constant keys e pi                                        ignore operands
▪ Replies       {"result": "26-10i", "real": 26, "imaginary": -10, ...}

Run:
    pip install -e .
    mathplex-server
"""

# ───────────────────────── CONFIGURATION ──────────────────────────────────── #
HOST          = "127.0.0.1"      # network interface to bind
PORT          = 5000             # listening port

# ────────────────────────── IMPLEMENTATION ───────────────────────────────── #
import json

from flask import Flask, jsonify, request

from .complex import E, PI, Complex
from .errors import MathplexError

app = Flask(__name__)

BINARY_OPS = {                   # request key → Complex method
    "add":  Complex.add,
    "sub":  Complex.subtract,
    "mul":  Complex.multiply,
    "div":  Complex.divide,
    "min":  Complex.min,
    "max":  Complex.max,
    "pow":  Complex.pow,
    "root": Complex.root,
}

UNARY_OPS = {
    name: getattr(Complex, name)
    for name in (
        "negate", "abs", "floor", "ceil", "round", "square", "sqrt", "log",
        "exp", "sin", "cos", "tan", "cot", "sec", "cosec", "asin", "acos", "atan",
    )
}

CONSTANTS = {"e": E, "pi": PI}

# ──────────────────────────── utilities ──────────────────────────────────── #
def _evaluate(operation: str, first, second):
    if operation in CONSTANTS:
        return CONSTANTS[operation]
    if operation in UNARY_OPS:
        return UNARY_OPS[operation](first)
    return BINARY_OPS[operation](first, second)

def _describe(value) -> dict:
    """JSON body for a result; ``abs`` yields a plain real."""
    if not isinstance(value, Complex):
        value = Complex(value, 0)
    return {
        "result":    value.to_string(),
        "real":      value.real,
        "imaginary": value.imaginary,
        "magnitude": value.magnitude,
        "angle":     value.angle,
    }

# ────────────────────────── request handlers ─────────────────────────────── #
@app.route("/", methods=["POST"])
def calculate() -> tuple:
    raw = request.get_data(as_text=False)

    # 1) decode JSON
    try:
        data      = json.loads(raw)
        operation = data.get("operation")
    except (json.JSONDecodeError, UnicodeDecodeError, AttributeError):
        app.logger.warning("Rejected body of %d bytes", len(raw))
        return jsonify(error="Body must be a JSON object with an 'operation' key"), 400

    if not isinstance(operation, str) or not (
            operation in CONSTANTS or operation in UNARY_OPS or operation in BINARY_OPS):
        app.logger.warning("Unknown operation %r", operation)
        return jsonify(error=f"Unknown operation {operation!r}"), 400

    # 2) run it, library errors become 400s
    first, second = data.get("first", 0), data.get("second", 0)
    try:
        value = _evaluate(operation, first, second)
    except MathplexError as exc:
        app.logger.warning("%s(%r, %r) failed: %s", operation, first, second, exc)
        return jsonify(error=exc.message, kind=type(exc).__name__), 400

    app.logger.debug("%s(%r, %r) -> %s", operation, first, second, value)
    return jsonify(**_describe(value)), 200

@app.route("/operations", methods=["GET"])
def operations() -> tuple:
    return jsonify(binary=sorted(BINARY_OPS),
                   unary=sorted(UNARY_OPS),
                   constants=sorted(CONSTANTS)), 200

# ───────────────────────────────── MAIN ──────────────────────────────────── #
def main() -> None:
    print(f"Starting complex calculator on http://{HOST}:{PORT}/")
    app.run(host=HOST, port=PORT)


if __name__ == "__main__":
    main()
