# MIT License
"""Saved outcomes for side-by-side comparison of capital configurations.

The store holds at most one :class:`~econlab.params.Scenario` per capital
configuration: saving again under the same name replaces the entry in
place.  Entries live for the session only.
"""
from __future__ import annotations

from typing import Iterator, List, Sequence

import pandas as pd

from .economics import max_profit_record
from .params import CapitalConfiguration, EconomicRecord, Scenario
from .utils import fmt_eur


class ScenarioStore:
    """Upsert-by-name list of saved scenarios."""

    def __init__(self) -> None:
        self._items: List[Scenario] = []

    def save(self, scenario: Scenario) -> None:
        for i, existing in enumerate(self._items):
            if existing.capital_name == scenario.capital_name:
                self._items[i] = scenario
                return
        self._items.append(scenario)

    def clear(self) -> None:
        self._items = []

    @property
    def items(self) -> List[Scenario]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Scenario]:
        return iter(list(self._items))

    def to_frame(self) -> pd.DataFrame:
        """Comparison table, one row per saved scenario, for display."""
        rows = [
            {
                "Capital": f"{s.icon} {s.capital_name}".strip(),
                "Max Profit": fmt_eur(s.max_profit),
                "Optimal Labour": f"{s.optimal_labour} chefs",
                "Price": fmt_eur(s.price_at_save),
                "Marginal Cost": fmt_eur(s.marginal_cost_at_max),
                "Avg. Total Cost": fmt_eur(s.average_total_cost_at_max),
            }
            for s in self._items
        ]
        columns = ["Capital", "Max Profit", "Optimal Labour", "Price", "Marginal Cost", "Avg. Total Cost"]
        return pd.DataFrame(rows, columns=columns)


def scenario_from_records(
    config: CapitalConfiguration,
    price: float,
    records: Sequence[EconomicRecord],
) -> Scenario:
    """Snapshot the profit-maximising outcome of ``records``."""
    best = max_profit_record(records)
    return Scenario(
        capital_name=config.name,
        icon=config.icon,
        max_profit=best.total_profit,
        optimal_labour=best.labour,
        price_at_save=price,
        marginal_cost_at_max=best.marginal_cost,
        average_total_cost_at_max=best.average_total_cost,
    )
