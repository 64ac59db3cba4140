# MIT License
"""Plotly figure builders for the explorer.

This module turns the chart scenes of :mod:`econlab.charts` into Plotly
figures used by the Streamlit frontend.  The figure axes are the scene's
plot-pixel space (y pointing down), so the smoothed SVG paths and bar
rectangles are drawn as layout shapes exactly as laid out.  Each column also
gets a transparent full-height bar acting as its hit region: selecting it
reports the column's pixel centre, which the scene resolves back to an x
value for the tooltip.
"""

from __future__ import annotations

from typing import Optional

import plotly.graph_objects as go

from .charts import BarScene, ChartScene, CurveScene
from .hit_test import Tooltip
from .params import ChartSettings
from .utils import fmt_eur, fmt_rate, short_label

AXIS_COLOR = "#94a3b8"
HIT_TRACE = "columns"


def _base_figure(scene: ChartScene, settings: ChartSettings) -> go.Figure:
    fig = go.Figure()
    fig.update_layout(
        title=scene.title,
        template="plotly_white",
        showlegend=len(scene.series) > 1,
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="center", x=0.5),
        margin=dict(l=10, r=10, t=50, b=10),
        hovermode="closest",
        dragmode=False,
        clickmode="event+select",
    )
    fig.update_xaxes(
        range=[-settings.margin_left, scene.width + settings.margin_right],
        visible=False,
        fixedrange=True,
    )
    fig.update_yaxes(
        range=[scene.height + settings.margin_bottom, -settings.margin_top],
        visible=False,
        fixedrange=True,
    )
    line = dict(color=AXIS_COLOR, width=1)
    fig.add_shape(type="line", x0=0, y0=0, x1=0, y1=scene.height, line=line)
    fig.add_shape(type="line", x0=0, y0=scene.height, x1=scene.width, y1=scene.height, line=line)
    if scene.zero_line is not None:
        fig.add_shape(
            type="line",
            x0=0,
            y0=scene.zero_line,
            x1=scene.width,
            y1=scene.zero_line,
            line=dict(color=AXIS_COLOR, width=1, dash="dot"),
        )
    for lbl in scene.y_labels:
        fig.add_annotation(x=lbl.x_px, y=lbl.y_px, text=lbl.text, showarrow=False, xanchor="right")
    for lbl in scene.x_labels:
        fig.add_annotation(x=lbl.x_px, y=lbl.y_px, text=lbl.text, showarrow=False)
    return fig


def _add_hit_regions(fig: go.Figure, scene: ChartScene) -> None:
    fig.add_bar(
        name=HIT_TRACE,
        x=[c.center for c in scene.columns],
        y=[scene.height] * len(scene.columns),
        base=[0.0] * len(scene.columns),
        width=[c.width for c in scene.columns],
        marker_color="rgba(0,0,0,0)",
        hoverinfo="none",
        showlegend=False,
    )


def _add_legend_entries(fig: go.Figure, scene: ChartScene) -> None:
    for s in scene.series:
        fig.add_scatter(
            x=[None], y=[None], mode="markers", name=s.label, marker=dict(color=s.color, size=10)
        )


def _add_tooltip(fig: go.Figure, scene: ChartScene, tooltip: Tooltip, money: bool) -> None:
    lines = [f"<b>Chefs: {tooltip.x:g}</b>"]
    for e in tooltip.entries:
        value = fmt_eur(e.y) if money else fmt_rate(e.y, 0)
        lines.append(f"<span style='color:{e.display_color}'>● {short_label(e.label)}: {value}</span>")
    fig.add_annotation(
        x=tooltip.x_px,
        y=tooltip.y_px,
        text="<br>".join(lines),
        showarrow=False,
        align="left",
        xanchor="right" if tooltip.x_px > scene.width / 2 else "left",
        xshift=-15 if tooltip.x_px > scene.width / 2 else 15,
        bgcolor="white",
        bordercolor=AXIS_COLOR,
        borderpad=4,
    )


def fig_curve(scene: CurveScene, tooltip: Optional[Tooltip] = None, settings: Optional[ChartSettings] = None) -> go.Figure:
    """Create a smoothed-curve chart from a curve scene.

    Parameters
    ----------
    scene:
        Output of :func:`econlab.charts.build_curve_scene`.
    tooltip:
        Resolved tooltip to draw, with its vertical crosshair.

    Returns
    -------
    plotly.graph_objects.Figure
    """
    settings = settings or ChartSettings()
    fig = _base_figure(scene, settings)
    for p in scene.paths:
        if p.d:
            fig.add_shape(type="path", path=p.d, line=dict(color=p.color, width=2))
    _add_hit_regions(fig, scene)
    _add_legend_entries(fig, scene)
    fig.add_scatter(
        x=[m.x_px for m in scene.markers],
        y=[m.y_px for m in scene.markers],
        mode="markers",
        marker=dict(color=[m.color for m in scene.markers], size=6),
        hoverinfo="skip",
        showlegend=False,
    )
    if tooltip is not None:
        fig.add_shape(
            type="line",
            x0=tooltip.x_px,
            y0=0,
            x1=tooltip.x_px,
            y1=scene.height,
            line=dict(color=AXIS_COLOR, width=1, dash="dash"),
        )
        for e in tooltip.entries:
            fig.add_scatter(
                x=[tooltip.x_px],
                y=[scene.y_scale(e.y)],
                mode="markers",
                marker=dict(color="white", size=10, line=dict(color=e.display_color, width=2)),
                hoverinfo="skip",
                showlegend=False,
            )
        _add_tooltip(fig, scene, tooltip, money=True)
    return fig


def fig_bar(scene: BarScene, tooltip: Optional[Tooltip] = None, settings: Optional[ChartSettings] = None) -> go.Figure:
    """Create a grouped bar chart from a bar scene."""
    settings = settings or ChartSettings()
    fig = _base_figure(scene, settings)
    for b in scene.bars:
        fig.add_shape(
            type="rect",
            x0=b.left,
            y0=b.top,
            x1=b.left + b.width,
            y1=b.top + b.height,
            fillcolor=b.color,
            line=dict(width=0),
        )
    _add_hit_regions(fig, scene)
    _add_legend_entries(fig, scene)
    if tooltip is not None:
        _add_tooltip(fig, scene, tooltip, money=False)
    return fig


def selected_pointer_x(event) -> Optional[float]:
    """Pixel x of the first selected hit region in a Streamlit chart event."""
    if not event:
        return None
    selection = event.get("selection") if isinstance(event, dict) else getattr(event, "selection", None)
    if not selection:
        return None
    points = selection.get("points") if isinstance(selection, dict) else getattr(selection, "points", None)
    if not points:
        return None
    return float(points[0]["x"])
