"""Streamlit entry point for the pizzeria production explorer.

This script sets up the session state, exposes the capital, labour and
price controls, and renders the metric cards, the three analysis charts,
the cost explanation and the scenario comparison table.  The full data
table lives on a separate page under `pages/`.
"""

import time

import streamlit as st

from econlab.analysis import AnalysisTask, LLMSettings, explain_costs
from econlab.animation import NumberTween
from econlab.catalog import PRODUCTION_CATALOG
from econlab.charts import build_bar_scene, build_curve_scene, cost_series, production_series, profit_series
from econlab.log import configure_logging
from econlab.params import ChartSettings, ModelSettings
from econlab.plots import fig_bar, fig_curve, selected_pointer_x
from econlab.scenarios import ScenarioStore, scenario_from_records
from econlab.state import AppState, OptimizeForCost, SelectCapital, SetLabour, SetPrice, derive_view, reduce
from econlab.utils import fmt_eur, fmt_quantity

st.set_page_config(page_title="Boom and Crust Pizzeria", page_icon="🍕", layout="wide")
configure_logging()

SETTINGS = ModelSettings()
CHART_SETTINGS = ChartSettings()


def _llm_settings() -> LLMSettings:
    """LLM settings, preferring Streamlit secrets over the environment."""
    settings = LLMSettings()
    try:
        api_key = st.secrets.get("OPENAI_API_KEY", settings.api_key)
        model = st.secrets.get("OPENAI_CHAT_MODEL", settings.model)
    except FileNotFoundError:
        return settings
    return settings.model_copy(update={"api_key": api_key, "model": model})


def _init_session() -> None:
    if "app_state" not in st.session_state:
        st.session_state.app_state = AppState()
    if "scenarios" not in st.session_state:
        st.session_state.scenarios = ScenarioStore()
    if "analysis" not in st.session_state:
        st.session_state.analysis = AnalysisTask()
    if "tweens" not in st.session_state:
        st.session_state.tweens = {}
    if "labour_slider" not in st.session_state:
        st.session_state.labour_slider = st.session_state.app_state.labour
    if "price_slider" not in st.session_state:
        st.session_state.price_slider = float(st.session_state.app_state.price)


def _dispatch(event) -> None:
    old = st.session_state.app_state
    new = reduce(old, event, PRODUCTION_CATALOG, SETTINGS)
    if new.capital_index != old.capital_index:
        st.session_state.analysis.reset()
    st.session_state.app_state = new
    st.session_state.labour_slider = new.labour
    st.session_state.price_slider = float(new.price)


def _on_labour() -> None:
    _dispatch(SetLabour(labour=st.session_state.labour_slider))


def _on_price() -> None:
    _dispatch(SetPrice(price=st.session_state.price_slider))


def _retarget_tweens(targets) -> None:
    """Point each metric tween at its new value, superseding any in flight."""
    now = time.monotonic()
    tweens = st.session_state.tweens
    for label, value in targets.items():
        tween = tweens.get(label)
        if tween is None:
            tweens[label] = NumberTween(start=value, end=value, started_at=now)
        elif tween.end != value:
            tweens[label] = tween.retarget(value, now)


def _animate_metrics(slots, formats) -> None:
    """Redraw the metric cards until every tween has settled."""
    tweens = st.session_state.tweens
    while True:
        now = time.monotonic()
        for label, slot in slots.items():
            slot.metric(label, formats[label](tweens[label].value_at(now)))
        if all(tweens[label].done(now) for label in slots):
            break
        time.sleep(1 / 30)


def _chart(scene, key: str, bars: bool) -> None:
    event = st.session_state.get(key)
    pointer_x = selected_pointer_x(event)
    tooltip = scene.tooltip_at(pointer_x) if pointer_x is not None else None
    fig = fig_bar(scene, tooltip, CHART_SETTINGS) if bars else fig_curve(scene, tooltip, CHART_SETTINGS)
    st.plotly_chart(fig, key=key, on_select="rerun", selection_mode="points", config={"displayModeBar": False})


def main() -> None:
    _init_session()
    state: AppState = st.session_state.app_state

    # --- SIDEBAR: CONTROLS -------------------------------------------------
    st.sidebar.header("Capital Investment")
    for i, cfg in enumerate(PRODUCTION_CATALOG):
        st.sidebar.button(
            f"{cfg.icon} {cfg.name} (Fixed Cost: {fmt_eur(cfg.fixed_cost, 0)})",
            key=f"capital_{i}",
            type="primary" if i == state.capital_index else "secondary",
            width="stretch",
            help=cfg.description,
            on_click=_dispatch,
            args=(SelectCapital(index=i),),
        )

    st.sidebar.header("Inputs")
    st.sidebar.slider(
        "Labour (Chefs)",
        min_value=0,
        max_value=SETTINGS.max_labour,
        key="labour_slider",
        on_change=_on_labour,
    )
    st.sidebar.slider(
        "Price per Pizza (€)",
        min_value=SETTINGS.price_min,
        max_value=SETTINGS.price_max,
        step=SETTINGS.price_step,
        key="price_slider",
        on_change=_on_price,
    )
    bars = st.sidebar.toggle("Show charts as bars", value=False)

    state = st.session_state.app_state
    view = derive_view(state, PRODUCTION_CATALOG, SETTINGS)

    # --- MAIN PAGE ---------------------------------------------------------
    st.title("🍕 Boom and Crust Pizzeria")

    # Metric cards
    cur = view.current
    formats = {
        "Total Production": lambda v: f"{fmt_quantity(v)} pizzas",
        "Total Revenue": fmt_eur,
        "Total Cost": fmt_eur,
        "Total Profit": fmt_eur,
    }
    slots = {label: col.empty() for label, col in zip(formats, st.columns(4))}
    _retarget_tweens(
        {
            "Total Production": cur.total_production,
            "Total Revenue": cur.total_revenue,
            "Total Cost": cur.total_cost,
            "Total Profit": cur.total_profit,
        }
    )
    if view.goal_achieved:
        st.success("🎯 You are at the profit-maximising level of labour!")

    build = build_bar_scene if bars else build_curve_scene
    col_a, col_b, col_c = st.columns(3)

    with col_a:
        _chart(build(production_series(view.records), "Production Analysis", CHART_SETTINGS), "chart_production", bars)
        st.caption(
            "Notice how 'Marginal Product' eventually declines. This is the **law of diminishing "
            "returns**, caused by the fixed size of your pizza oven (capital)."
        )

    with col_b:
        _chart(build(cost_series(view.records), "Cost Analysis", CHART_SETTINGS), "chart_cost", bars)
        task: AnalysisTask = st.session_state.analysis
        if st.button("Analyze Costs", disabled=task.is_loading):
            with st.spinner("Generating analysis..."):
                task.run(lambda: explain_costs(view.config, view.records, settings=_llm_settings()))
        if task.text:
            st.markdown(task.text)

    with col_c:
        _chart(build(profit_series(view.records), "Profit Analysis", CHART_SETTINGS), "chart_profit", bars)
        st.metric(
            "Max Possible Profit",
            f"{fmt_eur(view.max_profit.total_profit)} at {view.max_profit.labour} chefs",
        )
        b1, b2 = st.columns(2)
        b1.button("Optimize for Cost", width="stretch", on_click=_dispatch, args=(OptimizeForCost(),))
        if b2.button("Save Outcome", width="stretch"):
            st.session_state.scenarios.save(scenario_from_records(view.config, state.price, view.records))

    # --- SCENARIO COMPARISON -----------------------------------------------
    store: ScenarioStore = st.session_state.scenarios
    if len(store) > 0:
        st.markdown("---")
        h1, h2 = st.columns([5, 1])
        h1.subheader("Scenario Comparison")
        if h2.button("Clear"):
            store.clear()
            st.rerun()
        st.dataframe(store.to_frame(), hide_index=True, width="stretch")

    st.caption("Copyright Patrick Condon, Dublin College Blackrock")

    _animate_metrics(slots, formats)


if __name__ == "__main__":
    main()
