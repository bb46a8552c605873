"""Arithmetic operators used by number pyramids.

Both division and modulo are defined for a zero divisor: they evaluate to 0
instead of raising, so every pyramid cell stays an integer.
"""

from __future__ import annotations

import logging

from quiz_engine.core.models import Operator

logger = logging.getLogger(__name__)

_OPERATOR_NAMES: dict[Operator, dict[str, str]] = {
    Operator.ADD: {"default": "en", "en": "addition", "de": "Addition"},
    Operator.SUBTRACT: {"default": "en", "en": "subtraction", "de": "Subtraktion"},
    Operator.MULTIPLY: {"default": "en", "en": "multiplication", "de": "Multiplikation"},
    Operator.DIVIDE: {"default": "en", "en": "division", "de": "Division"},
    Operator.MODULO: {"default": "en", "en": "modular arithmetic", "de": "Modularer Arithmetik"},
}


def evaluate(op: Operator, left: int, right: int) -> int:
    """Apply ``op`` to two operands."""
    if op is Operator.ADD:
        return left + right
    if op is Operator.SUBTRACT:
        return left - right
    if op is Operator.MULTIPLY:
        return left * right
    if op is Operator.DIVIDE:
        if right == 0:
            return 0
        return left // right
    if op is Operator.MODULO:
        if right == 0:
            return 0
        # Remainder takes the sign of the dividend.
        remainder = abs(left) % abs(right)
        return -remainder if left < 0 else remainder
    raise ValueError(f"Unsupported operator: {op!r}")


def parse_operator(value: Operator | str | None) -> Operator:
    """Resolve a symbol or member name to an operator, defaulting to addition."""
    if isinstance(value, Operator):
        return value
    if value is None:
        return Operator.ADD
    text = str(value).strip()
    try:
        return Operator(text)
    except ValueError:
        pass
    try:
        return Operator[text.upper()]
    except KeyError:
        logger.warning("Unknown operator %r, falling back to addition", value)
        return Operator.ADD


def operator_name_entries(op: Operator) -> dict[str, str]:
    """Return the translation table naming ``op``."""
    return dict(_OPERATOR_NAMES[op])
