# MIT License
from __future__ import annotations

import math

NOT_AVAILABLE = "N/A"


def fmt_eur(x: float, decimals: int = 2) -> str:
    """Format a money amount, e.g. ``€1,234.50``; undefined values give N/A."""
    if not math.isfinite(x):
        return NOT_AVAILABLE
    sign = "-" if x < 0 else ""
    return f"{sign}€{abs(x):,.{decimals}f}"


def fmt_rate(x: float, decimals: int = 2) -> str:
    """Format a rate without currency sign; undefined values give N/A."""
    if not math.isfinite(x):
        return NOT_AVAILABLE
    return f"{x:.{decimals}f}"


def fmt_quantity(x: float) -> str:
    return f"{x:,.0f}"


def short_label(label: str) -> str:
    """First word of a series label, used in compact tooltips."""
    return label.split(" ")[0]
