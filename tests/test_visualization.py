"""Tests for the spending donut chart."""

from __future__ import annotations

from budget_buddy import visualization as viz


def test_empty_breakdown_gives_placeholder_figure() -> None:
    fig = viz.create_category_donut([])
    assert len(fig.data) == 0
    assert fig.layout.title.text == viz.EMPTY_CHART_TITLE


def test_donut_keeps_breakdown_order() -> None:
    breakdown = [{'name': 'Food', 'value': 13.0}, {'name': 'Transport', 'value': 5.0}]
    fig = viz.create_category_donut(breakdown)
    trace = fig.data[0]
    assert list(trace.labels) == ['Food', 'Transport']
    assert list(trace.values) == [13.0, 5.0]
    assert trace.hole == 0.75


def test_slice_colors_cycle() -> None:
    colors = viz.slice_colors(8)
    assert colors[:6] == viz.COLORS
    assert colors[6:] == viz.COLORS[:2]
