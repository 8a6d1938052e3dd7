import pytest

from profilereport.core import get_sample_data, parse_chart
from profilereport.renderers import render_chart
from profilereport.surfaces import RecordingSurface
from profilereport.types import ChartSpec, Dataset

COLORS = ["#3498db", "#e74c3c", "#2ecc71"]


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def sample_chart():
    return parse_chart(get_sample_data()["pages"][0]["sections"][1]["data"])


def dataset_lines(surface):
    return [c.params for c in surface.iter_commands("line") if c.params["color"] in COLORS + ["black"]]


# -------------------------------
# Tests for render_chart: sample time chart (3 datasets x 12 points)
# -------------------------------

def test_render_chart_returns_cursor_below_legend(surface, sample_chart):
    y = render_chart(surface, sample_chart, 300)
    # title gap 30, chart 200, bottom gap 70, 3 legend rows of 15
    assert y == 300 + 30 + 200 + 70 + 3 * 15

def test_render_chart_frame(surface, sample_chart):
    render_chart(surface, sample_chart, 300)
    frame = next(surface.iter_commands("rect")).params
    assert (frame["x"], frame["y"], frame["w"], frame["h"]) == (50.0, 330.0, 400.0, 200.0)

def test_render_chart_series_lines_and_points(surface, sample_chart):
    render_chart(surface, sample_chart, 300)
    lines = dataset_lines(surface)
    assert len(lines) == 3 * 11
    assert all(line["width"] == 2 for line in lines)
    circles = [c.params for c in surface.iter_commands("circle")]
    assert len(circles) == 36
    assert [c["fill"] for c in circles[::12]] == COLORS
    for c in circles:
        assert 50 <= c["x"] <= 450
        assert 330 <= c["y"] <= 530
        assert c["r"] == 2

def test_render_chart_axis_labels(surface, sample_chart):
    render_chart(surface, sample_chart, 300)
    texts = surface.texts()
    assert [t for t in texts if t.startswith("P") and t[1:].isdigit()] == [
        "P1", "P3", "P5", "P7", "P9", "P11",
    ]
    assert ["08:30", "10:15", "12:00", "13:45", "15:30", "17:15", "19:00"] == [
        t for t in texts if ":" in t
    ]
    ticks = [c.params for c in surface.iter_commands("line") if c.params["color"] == "#cccccc"]
    assert len(ticks) == 7
    assert all((t["x1"], t["x2"]) == (45.0, 50.0) for t in ticks)
    assert "Time" in texts and "Data Points" in texts

def test_render_chart_time_axis_is_inverted(surface, sample_chart):
    render_chart(surface, sample_chart, 300)
    labels = {c.params["text"]: c.params for c in surface.iter_commands("text")}
    # earliest time sits at the bottom of the chart area
    assert labels["08:30"]["y"] > labels["19:00"]["y"]

def test_render_chart_legend(surface, sample_chart):
    render_chart(surface, sample_chart, 300)
    swatches = [c.params for c in surface.iter_commands("rect") if c.params["fill"] is not None]
    assert [s["fill"] for s in swatches] == COLORS
    assert [s["y"] for s in swatches] == [570.0, 585.0, 600.0]
    assert all((s["w"], s["h"]) == (10.0, 10.0) for s in swatches)
    labels = [c.params for c in surface.iter_commands("text")
              if c.params["text"] in ("Project Alpha", "Project Beta", "Code Reviews")]
    assert [(l["x"], l["text"]) for l in labels] == [
        (70.0, "Project Alpha"), (70.0, "Project Beta"), (70.0, "Code Reviews"),
    ]

# -------------------------------
# Tests for render_chart: other variants and edge cases
# -------------------------------

def test_render_chart_single_point_dataset_draws_point_only(surface):
    chart = parse_chart({"title": "Single", "datasets": [{"label": "a", "color": "#e74c3c",
                                                          "data": [{"timeValue": "09:00"}]}]})
    render_chart(surface, chart, 100)
    assert dataset_lines(surface) == []
    (point,) = [c.params for c in surface.iter_commands("circle")]
    # degenerate domains map to the middle of the chart area
    assert (point["x"], point["y"]) == (250.0, 230.0)

def test_render_chart_category_value_labels(surface):
    chart = parse_chart({
        "title": "Scores",
        "labels": ["North", "South", "East"],
        "datasets": [{"label": "Sales", "color": "#2ecc71", "data": [4, 8.5, 6]}],
    })
    render_chart(surface, chart, 100)
    texts = surface.texts()
    for text in ("4", "8.5", "6", "North", "South", "East", "Category", "Value"):
        assert text in texts
    value_label = next(c.params for c in surface.iter_commands("text") if c.params["text"] == "8.5")
    assert value_label["size"] == 7

def test_render_chart_date_variant(surface):
    chart = parse_chart({
        "title": "Visits",
        "datasets": [{"label": "Site", "data": [
            {"date": "2024-01-01", "value": 1}, {"date": "2024-01-02", "value": 3},
        ]}],
    })
    render_chart(surface, chart, 100)
    texts = surface.texts()
    assert "2024-01-01" in texts and "2024-01-02" in texts
    assert "Date" in texts

def test_render_chart_without_points(surface):
    chart = ChartSpec(title="Empty", datasets=(Dataset("Nothing", "#3498db"),))
    y = render_chart(surface, chart, 100)
    assert y == 100 + 30 + 200 + 70 + 15
    assert list(surface.iter_commands("circle")) == []
    assert surface.texts() == ["Empty", "Nothing"]
    assert len(list(surface.iter_commands("rect"))) == 2

def test_render_chart_category_labels_are_thinned(surface):
    months = ["Jan", "Feb", "Mar", "Apr", "May", "Jun",
              "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]
    chart = parse_chart({
        "title": "Monthly",
        "labels": months,
        "datasets": [{"label": f"Team {i}", "color": COLORS[i], "data": list(range(12))}
                     for i in range(3)],
    })
    render_chart(surface, chart, 100)
    drawn = [t for t in surface.texts() if t in months]
    assert drawn == ["Jan", "Mar", "May", "Jul", "Sep", "Nov"]
