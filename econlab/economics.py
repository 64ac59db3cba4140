# MIT License
"""Economic derivation engine.

This module turns a :class:`~econlab.params.CapitalConfiguration`, a unit
price and the wage constants into one :class:`~econlab.params.EconomicRecord`
per labour level.  All functions are pure: every call rebuilds a fresh list
and nothing is mutated after construction.

Undefined rates (marginal cost with zero marginal product, average total
cost with zero production) are represented by ``math.inf``.  They are never
raised as errors; charts drop them and tables display them as ``N/A``.
"""
from __future__ import annotations

import logging
import math
from typing import Dict, List, Optional, Sequence

import pandas as pd

from .params import CapitalConfiguration, EconomicRecord, ModelSettings
from .utils import NOT_AVAILABLE

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS = ModelSettings()


def production_at(config: CapitalConfiguration, labour: int) -> float:
    """Total production for ``labour`` units, 0 outside the table."""
    if 0 <= labour < len(config.production):
        return float(config.production[labour])
    return 0.0


def derive_economics(
    config: CapitalConfiguration,
    price: float,
    max_labour: Optional[int] = None,
    settings: Optional[ModelSettings] = None,
) -> List[EconomicRecord]:
    """Derive the per-labour-level metrics for one capital configuration.

    Parameters
    ----------
    config:
        Capital configuration providing the fixed cost and production table.
    price:
        Unit price of the output (EUR).
    max_labour:
        Largest labour level to derive.  Defaults to
        ``settings.max_labour``.
    settings:
        Wage constants; defaults to :class:`ModelSettings`.

    Returns
    -------
    list of EconomicRecord
        ``max_labour + 1`` records, index equal to labour.
    """
    settings = settings or DEFAULT_SETTINGS
    n = settings.max_labour if max_labour is None else max_labour
    unit_cost = settings.labour_unit_cost
    records = []
    prev_production = 0.0
    for i in range(n + 1):
        total_production = production_at(config, i)
        marginal_product = total_production - prev_production if i > 0 else total_production
        total_revenue = total_production * price
        variable_cost = i * unit_cost
        fixed_cost = config.fixed_cost
        total_cost = fixed_cost + variable_cost
        total_profit = total_revenue - total_cost
        if marginal_product > 0:
            marginal_cost = (variable_cost - (i - 1) * unit_cost) / marginal_product
        else:
            marginal_cost = math.inf
        if total_production > 0:
            average_total_cost = total_cost / total_production
        else:
            average_total_cost = math.inf
        records.append(
            EconomicRecord(
                labour=i,
                total_production=total_production,
                marginal_product=marginal_product,
                total_revenue=total_revenue,
                variable_cost=variable_cost,
                fixed_cost=fixed_cost,
                total_cost=total_cost,
                total_profit=total_profit,
                marginal_cost=marginal_cost,
                average_total_cost=average_total_cost,
            )
        )
        prev_production = total_production
    logger.debug("Derived %d records for %r at price %.2f", len(records), config.name, price)
    return records


def max_profit_record(records: Sequence[EconomicRecord]) -> EconomicRecord:
    """Return the profit-maximising record.

    Ties are resolved in favour of the lowest labour level: the scan keeps
    the first maximum it meets.
    """
    best = records[0]
    for rec in records[1:]:
        if rec.total_profit > best.total_profit:
            best = rec
    return best


def min_average_cost_record(records: Sequence[EconomicRecord]) -> EconomicRecord:
    """Return the record with the lowest finite average total cost.

    Only records with ``labour > 0`` are candidates.  When none has a finite
    average total cost the first record is returned.
    """
    valid = [r for r in records if r.labour > 0 and math.isfinite(r.average_total_cost)]
    if not valid:
        return records[0]
    best = valid[0]
    for rec in valid[1:]:
        if rec.average_total_cost < best.average_total_cost:
            best = rec
    return best


def is_profit_goal_achieved(current: EconomicRecord, best: EconomicRecord, tol: float = 0.01) -> bool:
    """True when ``current`` earns a positive profit equal to the maximum."""
    return current.total_profit > 0 and abs(current.total_profit - best.total_profit) < tol


def economics_frame(records: Sequence[EconomicRecord]) -> pd.DataFrame:
    """Tabulate records as a DataFrame, one row per labour level."""
    return pd.DataFrame([r.model_dump() for r in records])


RATE_COLUMNS = ["marginal_cost", "average_total_cost"]


def export_frame(records: Sequence[EconomicRecord]) -> pd.DataFrame:
    """Like :func:`economics_frame`, with undefined rates written as ``N/A``."""
    df = economics_frame(records)
    for c in RATE_COLUMNS:
        df[c] = df[c].map(lambda v: v if math.isfinite(v) else NOT_AVAILABLE)
    return df


def cost_table_rows(records: Sequence[EconomicRecord]) -> List[Dict[str, float]]:
    """Rows of (labour, production, ATC, MC) for labour > 0."""
    return [
        dict(
            labour=r.labour,
            total_production=r.total_production,
            average_total_cost=r.average_total_cost,
            marginal_cost=r.marginal_cost,
        )
        for r in records
        if r.labour > 0
    ]
