# MIT License
"""Static catalog of capital configurations.

``Production[i]`` is the total number of pizzas produced by ``i`` chefs
working with the given capital.
"""
from __future__ import annotations

from typing import Dict, Iterable, List

from .params import CapitalConfiguration

PRODUCTION_CATALOG: List[CapitalConfiguration] = [
    CapitalConfiguration(
        name="Standard Oven",
        description="A reliable, small pizza oven. Good for starting out.",
        icon="🔥",
        fixed_cost=100.0,
        production=(0, 10, 25, 45, 60, 70, 75, 77, 78, 78, 75),
    ),
    CapitalConfiguration(
        name="Conveyor Belt Oven",
        description="A larger, more efficient oven that streamlines the cooking process.",
        icon="⏩",
        fixed_cost=200.0,
        production=(0, 20, 50, 90, 140, 180, 210, 230, 240, 245, 248),
    ),
    CapitalConfiguration(
        name="Industrial Kitchen",
        description="A fully-equipped industrial kitchen for maximum output.",
        icon="🏭",
        fixed_cost=400.0,
        production=(0, 30, 70, 120, 180, 250, 330, 420, 500, 560, 600),
    ),
]


def validate_catalog(configs: Iterable[CapitalConfiguration]) -> List[CapitalConfiguration]:
    """Return ``configs`` as a list, raising if two share a name."""
    seen = set()
    out = []
    for cfg in configs:
        if cfg.name in seen:
            raise ValueError(f"duplicate capital configuration name: {cfg.name!r}")
        seen.add(cfg.name)
        out.append(cfg)
    return out


def catalog_by_name(configs: Iterable[CapitalConfiguration] = PRODUCTION_CATALOG) -> Dict[str, CapitalConfiguration]:
    return {cfg.name: cfg for cfg in validate_catalog(configs)}


def get_configuration(name: str, configs: Iterable[CapitalConfiguration] = PRODUCTION_CATALOG) -> CapitalConfiguration:
    """Look up a configuration by name.

    Raises
    ------
    KeyError
        If no configuration has that name.
    """
    return catalog_by_name(configs)[name]
