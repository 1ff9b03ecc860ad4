"""
Utilidades para interpretar y escalar yields ("1 KG", "60 pieces", "1 Pizza (23cm)").
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Union

_YIELD = re.compile(r"^([\d.]+)\s*(.*)$")


@dataclass(frozen=True)
class ParsedYield:
    value: float
    unit: str
    original: str


def parse_yield(yield_string: str) -> ParsedYield:
    """
    "1 KG" → (1.0, "KG"). Sin número → valor 1 y todo el texto como unidad.
    """
    if not yield_string or not yield_string.strip():
        return ParsedYield(value=1.0, unit="", original="")

    trimmed = yield_string.strip()
    match = _YIELD.match(trimmed)
    if match:
        try:
            value = float(match.group(1))
        except ValueError:
            value = 1.0
        return ParsedYield(value=value, unit=match.group(2).strip() or "unit", original=trimmed)

    return ParsedYield(value=1.0, unit=trimmed, original=trimmed)


def calculate_multiplier(base: ParsedYield, target_value: float) -> float:
    if base.value == 0:
        return 1.0
    return target_value / base.value


def scale_quantity(quantity: Union[float, str], multiplier: float) -> float:
    """Escala una cantidad y redondea a 2 decimales. No numérica → 0."""
    try:
        value = float(quantity)
    except (TypeError, ValueError):
        return 0.0
    return round(value * multiplier, 2)


def format_number(value: float) -> str:
    """1200.0 → "1200", 2.5 → "2.5", 0.333 → "0.33"."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.2f}".rstrip("0").rstrip(".")


def format_scaled_yield(base: ParsedYield, target_value: float) -> str:
    return f"{format_number(target_value)} {base.unit}".strip()
