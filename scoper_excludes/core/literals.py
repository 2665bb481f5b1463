"""
Literal coercion — Turn a small, fixed set of literal shapes into strings.

Used for the name argument of define(). Only statically known shapes are
accepted: string literals, integer and float literals, and '.' chains of
those. Anything else raises UnsupportedLiteralError.
"""

from ..errors import UnsupportedLiteralError
from .nodes import ExprKind


def literal_to_string(expr) -> str:
    """
    Convert a literal expression to the string PHP would produce.

    Args:
        expr: Expression node

    Returns:
        String value of the literal

    Raises:
        UnsupportedLiteralError: If expr is not a recognised literal shape
    """
    if expr.kind is ExprKind.STRING:
        return expr.value
    if expr.kind is ExprKind.NUMBER:
        return _number_to_string(expr)
    if expr.kind is ExprKind.CONCAT:
        return literal_to_string(expr.left) + literal_to_string(expr.right)
    if expr.kind is ExprKind.INTERPOLATED_STRING:
        raise UnsupportedLiteralError(
            f"Interpolated string {expr.raw} has no static value."
        )
    if expr.kind is ExprKind.OTHER:
        raise UnsupportedLiteralError(
            f"Cannot convert {expr.node_type} expression '{expr.raw}' to string."
        )
    raise UnsupportedLiteralError(f"Cannot convert {expr.kind.value} expression to string.")


def _number_to_string(expr) -> str:
    text = expr.raw.replace("_", "")
    try:
        if expr.is_float:
            return _float_to_string(float(text))
        return str(_parse_int(text))
    except ValueError as e:
        raise UnsupportedLiteralError(f"Invalid number literal '{expr.raw}'.") from e


def _parse_int(text: str) -> int:
    lowered = text.lower()
    if lowered.startswith(("0x", "0b", "0o")):
        return int(lowered, 0)
    if len(lowered) > 1 and lowered.startswith("0"):
        return int(lowered, 8)
    return int(lowered)


def _float_to_string(value: float) -> str:
    # PHP prints integral floats without a fractional part below 1e15
    if value.is_integer() and abs(value) < 1e15:
        return str(int(value))
    text = repr(value)
    if "e" in text:
        mantissa, exponent = text.split("e")
        if "." not in mantissa:
            mantissa += ".0"
        sign = "-" if exponent.startswith("-") else "+"
        return f"{mantissa}E{sign}{exponent.lstrip('+-')}"
    return text
