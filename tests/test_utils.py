"""Tests for display formatting helpers."""

import math

from econlab.utils import fmt_eur, fmt_quantity, fmt_rate, short_label


def test_fmt_eur():
    assert fmt_eur(1234.5) == "€1,234.50"
    assert fmt_eur(-95) == "-€95.00"
    assert fmt_eur(100, 0) == "€100"
    assert fmt_eur(math.inf) == "N/A"


def test_fmt_rate():
    assert fmt_rate(580 / 45) == "12.89"
    assert fmt_rate(20.0, 0) == "20"
    assert fmt_rate(math.inf) == "N/A"
    assert fmt_rate(math.nan) == "N/A"


def test_misc():
    assert fmt_quantity(1234) == "1,234"
    assert short_label("Marginal Product of Labour") == "Marginal"
