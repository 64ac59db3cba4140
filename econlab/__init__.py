"""Core package for the production, cost and profit explorer.

This package contains the deterministic economic model (production table
to per-labour-level costs and profits), the chart engine (scales, smoothed
paths with zero-crossing splits, grouped bars and tooltip hit testing) and
the small pieces of state used by the Streamlit dashboard.

Each submodule exposes pure functions or plain models; the Streamlit pages
only wire widgets to them.
"""

from .params import CapitalConfiguration, ModelSettings, ChartSettings, EconomicRecord, Scenario
from .catalog import PRODUCTION_CATALOG, get_configuration
from .economics import derive_economics, max_profit_record, min_average_cost_record, economics_frame
from .scales import scale_value, value_domain
from .paths import ChartPoint, build_smooth_path, split_at_zero_crossing
from .hit_test import resolve_column, resolve_band
from .charts import ChartSeries, SeriesKind, build_curve_scene, build_bar_scene
from .scenarios import ScenarioStore, scenario_from_records
from .state import AppState, reduce, derive_view

__all__ = [
    "CapitalConfiguration",
    "ModelSettings",
    "ChartSettings",
    "EconomicRecord",
    "Scenario",
    "PRODUCTION_CATALOG",
    "get_configuration",
    "derive_economics",
    "max_profit_record",
    "min_average_cost_record",
    "economics_frame",
    "scale_value",
    "value_domain",
    "ChartPoint",
    "build_smooth_path",
    "split_at_zero_crossing",
    "resolve_column",
    "resolve_band",
    "ChartSeries",
    "SeriesKind",
    "build_curve_scene",
    "build_bar_scene",
    "ScenarioStore",
    "scenario_from_records",
    "AppState",
    "reduce",
    "derive_view",
]
