# MIT License
"""Data models for the production, cost and profit explorer.

Capital setups, model constants and derived rows are pydantic models, so
bad production tables or price bounds fail at construction and records can
be dumped straight into a DataFrame.

:class:`CapitalConfiguration` describes a fixed-capital setup (an oven,
a conveyor belt, a kitchen) and its discrete production table.
:class:`ModelSettings` and :class:`ChartSettings` hold the constants used by
the economic engine and the chart engine.  :class:`EconomicRecord` is one
derived row per labour level and :class:`Scenario` a saved snapshot used for
side-by-side comparison.
"""
from __future__ import annotations

import math
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic import field_validator


class CapitalConfiguration(BaseModel):
    """A named fixed-capital configuration.

    Attributes
    ----------
    name:
        Unique name within a catalog.
    fixed_cost:
        Cost of the capital, independent of labour (EUR).
    production:
        Total output for 0, 1, 2, ... units of labour.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    description: str = Field("", description="Short description shown next to the selector")
    icon: str = Field("", description="Emoji displayed with the name")
    fixed_cost: float = Field(..., ge=0.0, le=1e9, description="Fixed cost of the capital (EUR)")
    production: Tuple[int, ...] = Field(..., min_length=1, description="Total production indexed by labour")

    @field_validator("production")
    def production_non_negative(cls, v):
        if any(q < 0 for q in v):
            raise ValueError("production table values must be non-negative")
        return v


class ModelSettings(BaseModel):
    """Constants of the economic model.

    Labour is paid per shift, so one unit of labour costs
    ``wage_rate_per_hour * shift_hours`` (EUR 160 with the defaults).
    """

    wage_rate_per_hour: float = Field(20.0, ge=0.0, le=10_000.0, description="Wage rate (EUR/hour)")
    shift_hours: float = Field(8.0, gt=0.0, le=24.0, description="Length of one shift (hours)")
    max_labour: int = Field(10, ge=0, le=1000, description="Largest labour level modelled")
    price_min: float = Field(5.0, gt=0.0)
    price_max: float = Field(25.0, gt=0.0)
    price_step: float = Field(0.5, gt=0.0)
    default_price: float = Field(15.0, gt=0.0)
    default_labour: int = Field(3, ge=0)

    @field_validator("price_max")
    def max_above_min(cls, v, values):
        if "price_min" in values.data and v <= values.data["price_min"]:
            raise ValueError("price_max must be strictly greater than price_min")
        return v

    @property
    def labour_unit_cost(self) -> float:
        return self.wage_rate_per_hour * self.shift_hours


class ChartSettings(BaseModel):
    """Geometry of the drawn charts, in pixels."""

    svg_width: float = Field(320.0, gt=0.0)
    svg_height: float = Field(200.0, gt=0.0)
    margin_top: float = Field(20.0, ge=0.0)
    margin_right: float = Field(20.0, ge=0.0)
    margin_bottom: float = Field(30.0, ge=0.0)
    margin_left: float = Field(40.0, ge=0.0)
    tension: float = Field(0.5, ge=0.0, le=1.0, description="Catmull-Rom tension")
    bar_padding: float = Field(0.2, ge=0.0, lt=1.0, description="Side padding fraction of each bar band")

    @property
    def plot_width(self) -> float:
        return self.svg_width - self.margin_left - self.margin_right

    @property
    def plot_height(self) -> float:
        return self.svg_height - self.margin_top - self.margin_bottom


class EconomicRecord(BaseModel):
    """Derived metrics for one labour level.

    ``marginal_cost`` and ``average_total_cost`` are ``math.inf`` when the
    rate is undefined (zero marginal product or zero production).
    """

    model_config = ConfigDict(frozen=True)

    labour: int = Field(..., ge=0)
    total_production: float
    marginal_product: float
    total_revenue: float
    variable_cost: float
    fixed_cost: float
    total_cost: float
    total_profit: float
    marginal_cost: float
    average_total_cost: float

    @property
    def has_marginal_cost(self) -> bool:
        return math.isfinite(self.marginal_cost)

    @property
    def has_average_total_cost(self) -> bool:
        return math.isfinite(self.average_total_cost)


class Scenario(BaseModel):
    """Snapshot of the profit-maximising outcome for one capital configuration."""

    capital_name: str
    icon: str = ""
    max_profit: float
    optimal_labour: int = Field(..., ge=0)
    price_at_save: float = Field(..., gt=0.0)
    marginal_cost_at_max: float
    average_total_cost_at_max: float
