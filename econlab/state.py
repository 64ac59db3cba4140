# MIT License
"""Explicit state and reducer for the interactive explorer.

The whole interactive state is three values: the unit price, the selected
capital configuration and the labour level.  Every user action is an event
reduced into a new frozen :class:`AppState`; all derived values are then
recomputed from scratch by :func:`derive_view`, so nothing derived can go
stale.
"""
from __future__ import annotations

from typing import List, Optional, Sequence, Union

from pydantic import BaseModel, ConfigDict, Field

from .catalog import PRODUCTION_CATALOG
from .economics import derive_economics, is_profit_goal_achieved, max_profit_record, min_average_cost_record
from .params import CapitalConfiguration, EconomicRecord, ModelSettings

DEFAULT_SETTINGS = ModelSettings()


class AppState(BaseModel):
    model_config = ConfigDict(frozen=True)

    price: float = Field(DEFAULT_SETTINGS.default_price, gt=0.0)
    capital_index: int = Field(0, ge=0)
    labour: int = Field(DEFAULT_SETTINGS.default_labour, ge=0)


class SetLabour(BaseModel):
    labour: int


class SetPrice(BaseModel):
    price: float


class SelectCapital(BaseModel):
    index: int


class OptimizeForCost(BaseModel):
    """Move labour to the level with the lowest average total cost."""


Event = Union[SetLabour, SetPrice, SelectCapital, OptimizeForCost]


class EconomicView(BaseModel):
    """Everything derived from one :class:`AppState`."""

    config: CapitalConfiguration
    records: List[EconomicRecord]
    current: EconomicRecord
    max_profit: EconomicRecord
    min_average_cost: EconomicRecord
    goal_achieved: bool


def _clamp(v, lo, hi):
    return max(lo, min(hi, v))


def reduce(
    state: AppState,
    event: Event,
    catalog: Sequence[CapitalConfiguration] = PRODUCTION_CATALOG,
    settings: Optional[ModelSettings] = None,
) -> AppState:
    """Return the state after ``event``.

    Labour and price are clamped to the slider ranges.

    Raises
    ------
    ValueError
        If a capital index outside the catalog is selected.
    TypeError
        For unknown event types.
    """
    settings = settings or DEFAULT_SETTINGS
    if isinstance(event, SetLabour):
        return state.model_copy(update={"labour": _clamp(int(event.labour), 0, settings.max_labour)})
    if isinstance(event, SetPrice):
        return state.model_copy(update={"price": _clamp(float(event.price), settings.price_min, settings.price_max)})
    if isinstance(event, SelectCapital):
        if not 0 <= event.index < len(catalog):
            raise ValueError(f"capital index {event.index} outside catalog of {len(catalog)}")
        return state.model_copy(update={"capital_index": event.index})
    if isinstance(event, OptimizeForCost):
        view = derive_view(state, catalog, settings)
        return state.model_copy(update={"labour": view.min_average_cost.labour})
    raise TypeError(f"unknown event: {event!r}")


def derive_view(
    state: AppState,
    catalog: Sequence[CapitalConfiguration] = PRODUCTION_CATALOG,
    settings: Optional[ModelSettings] = None,
) -> EconomicView:
    settings = settings or DEFAULT_SETTINGS
    config = catalog[state.capital_index]
    records = derive_economics(config, state.price, settings.max_labour, settings)
    current = records[_clamp(state.labour, 0, len(records) - 1)]
    best = max_profit_record(records)
    return EconomicView(
        config=config,
        records=records,
        current=current,
        max_profit=best,
        min_average_cost=min_average_cost_record(records),
        goal_achieved=is_profit_goal_achieved(current, best),
    )
