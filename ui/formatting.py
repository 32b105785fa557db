# ui/formatting.py
# Display helpers for money and large numbers. No I/O.

from decimal import Decimal, ROUND_HALF_UP
import re

_COMPACT_UNITS = [(1e12, "T"), (1e9, "B"), (1e6, "M"), (1e3, "K")]


def _half_up(x: float, places: int = 0) -> Decimal:
    quantum = Decimal(1).scaleb(-places)
    return Decimal(str(x)).quantize(quantum, rounding=ROUND_HALF_UP)


def format_currency(value: float) -> str:
    """Whole US dollars with thousands separators, e.g. `$1,875,000`."""
    amount = _half_up(value)
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.0f}"


def format_compact(value: float) -> str:
    """Short axis label: 625K, 1.9M. At most one fractional digit."""
    sign = "-" if value < 0 else ""
    v = abs(float(value))
    for i, (size, suffix) in enumerate(_COMPACT_UNITS):
        if v >= size:
            scaled = _half_up(v / size, 1)
            # 999.96K rounds to 1000K; show it as 1M instead
            if scaled >= 1000 and i > 0:
                size, suffix = _COMPACT_UNITS[i - 1]
                scaled = _half_up(v / size, 1)
            return f"{sign}{_trim(scaled)}{suffix}"
    return f"{sign}{_trim(_half_up(v, 1))}"


def _trim(d: Decimal) -> str:
    text = f"{d:f}"
    return text[:-2] if text.endswith(".0") else text


def parse_currency(raw: str) -> float:
    """Digits only; anything unparseable reads as zero."""
    digits = re.sub(r"[^\d]", "", raw or "")
    return float(digits) if digits else 0.0
