"""
Line chart renderer.

Draws a chart section as a bordered plot area with one polyline per
dataset, axis labels, axis titles and a legend. Domain handling is left to
the axis strategies in :mod:`profilereport.core.axes`; this module only
scales normalized positions to the plot area.

Functions
---------
render_chart(surface, chart, cursor_y, layout)
    Draw a ``ChartSpec`` and return the cursor below it.
chart_extent(chart, layout)
    Vertical space a chart takes below its title.
"""

import logging

from ..core.axes import ChartMapping, build_chart_mapping
from ..core.layout import LayoutConfig
from ..surfaces import DrawingSurface
from ..types import ChartSpec

logger = logging.getLogger(__name__)


def chart_extent(chart: ChartSpec, layout: LayoutConfig) -> float:
    """Height reserved for the plot area, axis labels and legend rows."""
    return (
        layout.chart_height
        + layout.chart_bottom_gap
        + layout.chart_legend_stride * len(chart.datasets)
    )


def render_chart(
    surface: DrawingSurface,
    chart: ChartSpec,
    cursor_y: float,
    layout: LayoutConfig = None,
) -> float:
    """
    Draw `chart` starting at `cursor_y`.

    Parameters
    ----------
    surface : DrawingSurface
        Target surface.
    chart : ChartSpec
        Parsed chart data.
    cursor_y : float
        Vertical position of the chart title.
    layout : LayoutConfig, optional
        Layout constants.

    Returns
    -------
    float
        ``top + chart_height + chart_bottom_gap + legend_stride * n_datasets``
        where ``top`` is the top edge of the plot area.

    Notes
    -----
    - A chart without any point only gets its frame, title and legend.
    - A dataset with a single point is drawn as a dot without a line.
    """
    layout = layout or LayoutConfig()
    surface.draw_text(
        chart.title,
        layout.chart_x,
        cursor_y,
        size=layout.chart_title_size,
        color=layout.text_color,
    )
    top = cursor_y + layout.chart_title_gap
    surface.draw_rect(layout.chart_x, top, layout.chart_width, layout.chart_height)

    mapping = build_chart_mapping(
        chart,
        x_target=layout.chart_x_target_labels,
        date_target=layout.chart_date_target_labels,
        y_intervals=layout.chart_y_intervals,
    )
    if mapping is None:
        logger.debug("Chart '%s' has no points; drawing frame only", chart.title)
    else:
        _draw_series(surface, chart, mapping, top, layout)
        _draw_axes(surface, mapping, top, layout)

    _draw_legend(surface, chart, top, layout)
    return top + chart_extent(chart, layout)


def _to_area(nx, ny, top: float, layout: LayoutConfig):
    """Scale normalized positions to surface coordinates (y inverted)."""
    xs = layout.chart_x + nx * layout.chart_width
    ys = top + layout.chart_height - ny * layout.chart_height
    return xs, ys


def _draw_series(
    surface: DrawingSurface,
    chart: ChartSpec,
    mapping: ChartMapping,
    top: float,
    layout: LayoutConfig,
) -> None:
    label_width = layout.chart_x_label_width
    for i, (dataset, (nx, ny)) in enumerate(zip(chart.datasets, mapping.series)):
        xs, ys = _to_area(nx, ny, top, layout)
        for j in range(1, len(xs)):
            surface.draw_line(
                xs[j - 1],
                ys[j - 1],
                xs[j],
                ys[j],
                color=dataset.color,
                width=layout.chart_line_width,
            )
        for x, y in zip(xs, ys):
            surface.draw_circle(x, y, layout.chart_point_radius, fill=dataset.color)
        if mapping.value_labels is None:
            continue
        size = layout.chart_value_label_size
        for x, y, text in zip(xs, ys, mapping.value_labels[i]):
            surface.draw_text(
                text,
                x - label_width / 2,
                y - layout.chart_point_radius - size * 1.5,
                size=size,
                width=label_width,
                align="center",
                color=layout.text_color,
            )


def _draw_axes(
    surface: DrawingSurface, mapping: ChartMapping, top: float, layout: LayoutConfig
) -> None:
    bottom = top + layout.chart_height
    size = layout.chart_label_size
    label_box = layout.chart_x - layout.chart_tick_length - 2 - layout.chart_y_label_x

    for tick in mapping.y_scale.ticks():
        y = bottom - tick.position * layout.chart_height
        surface.draw_text(
            tick.label,
            layout.chart_y_label_x,
            y - size / 2,
            size=size,
            width=label_box,
            align="right",
            color=layout.text_color,
        )
        surface.draw_line(
            layout.chart_x - layout.chart_tick_length,
            y,
            layout.chart_x,
            y,
            color=layout.chart_tick_color,
        )

    label_width = layout.chart_x_label_width
    for tick in mapping.x_scale.ticks():
        x = layout.chart_x + tick.position * layout.chart_width
        surface.draw_text(
            tick.label,
            x - label_width / 2,
            bottom + 5,
            size=size,
            width=label_width,
            align="center",
            color=layout.text_color,
        )

    title_size = layout.chart_axis_title_size
    surface.draw_text(
        mapping.y_title,
        layout.chart_y_label_x,
        top - title_size - 2,
        size=title_size,
        color=layout.text_color,
    )
    surface.draw_text(
        mapping.x_title,
        layout.chart_x,
        bottom + 25,
        size=title_size,
        width=layout.chart_width,
        align="center",
        color=layout.text_color,
    )


def _draw_legend(
    surface: DrawingSurface, chart: ChartSpec, top: float, layout: LayoutConfig
) -> None:
    legend_top = top + layout.chart_height + layout.chart_legend_offset
    swatch = layout.chart_legend_swatch
    for i, dataset in enumerate(chart.datasets):
        y = legend_top + i * layout.chart_legend_stride
        surface.draw_rect(layout.chart_x, y, swatch, swatch, stroke=None, fill=dataset.color)
        surface.draw_text(
            dataset.label,
            layout.chart_x + layout.chart_legend_label_dx,
            y + 1,
            size=layout.chart_axis_title_size,
            color=layout.text_color,
        )
