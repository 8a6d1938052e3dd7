import datetime

import numpy as np
import pytest

from profilereport.core import (
    DateScale,
    IndexScale,
    NumericScale,
    TimeOfDayScale,
    build_chart_mapping,
    get_sample_data,
    parse_chart,
    thinning_stride,
)
from profilereport.types import ChartSpec, Dataset


@pytest.fixture
def sample_chart():
    data = get_sample_data()
    return parse_chart(data["pages"][0]["sections"][1]["data"], "Performance Chart")


# -------------------------------
# Tests for thinning_stride
# -------------------------------

@pytest.mark.parametrize("count, target, expected", [
    (12, 8, 2),
    (8, 8, 1),
    (5, 8, 1),
    (17, 8, 3),
    (10, 6, 2),
    (0, 8, 1),
])
def test_thinning_stride(count, target, expected):
    assert thinning_stride(count, target) == expected

# -------------------------------
# Tests for IndexScale
# -------------------------------

def test_index_scale_thins_generated_labels():
    ticks = IndexScale(12, target=8).ticks()
    assert [t.label for t in ticks] == ["P1", "P3", "P5", "P7", "P9", "P11"]
    assert ticks[0].position == 0.0
    assert ticks[1].position == pytest.approx(2 / 11)

def test_index_scale_keeps_every_label_for_short_series():
    ticks = IndexScale(5, target=8).ticks()
    assert [t.label for t in ticks] == ["P1", "P2", "P3", "P4", "P5"]
    assert ticks[-1].position == 1.0

def test_index_scale_thins_explicit_labels():
    labels = [f"C{i}" for i in range(12)]
    ticks = IndexScale(12, labels=labels, target=8).ticks()
    assert [t.label for t in ticks] == ["C0", "C2", "C4", "C6", "C8", "C10"]
    assert ticks[1].position == pytest.approx(2 / 11)

def test_index_scale_keeps_short_explicit_labels():
    ticks = IndexScale(4, labels=["Q1", "Q2", "Q3", "Q4"], target=8).ticks()
    assert [t.label for t in ticks] == ["Q1", "Q2", "Q3", "Q4"]

def test_index_scale_single_point_is_centered():
    scale = IndexScale(1)
    assert scale.normalize([0]).tolist() == [0.5]
    assert [(t.position, t.label) for t in scale.ticks()] == [(0.5, "P1")]

def test_index_scale_empty():
    assert IndexScale(0).ticks() == []

# -------------------------------
# Tests for NumericScale / TimeOfDayScale
# -------------------------------

def test_numeric_scale_linspace_ticks():
    ticks = NumericScale(0, 12, n_intervals=6).ticks()
    assert [t.label for t in ticks] == ["0", "2", "4", "6", "8", "10", "12"]
    assert [t.position for t in ticks] == pytest.approx(np.linspace(0, 1, 7).tolist())

def test_numeric_scale_clips_out_of_domain_values():
    scale = NumericScale(0, 10)
    assert scale.normalize([-5, 5, 15]).tolist() == [0.0, 0.5, 1.0]

def test_numeric_scale_degenerate_domain_maps_to_midpoint():
    scale = NumericScale(4, 4)
    assert scale.normalize([4, 4]).tolist() == [0.5, 0.5]
    assert [(t.position, t.label) for t in scale.ticks()] == [(0.5, "4")]

def test_time_of_day_scale_ticks_on_whole_minute_steps():
    # 08:30 .. 19:00 spans 630 minutes, step 105
    ticks = TimeOfDayScale(510, 1140).ticks()
    assert [t.label for t in ticks] == [
        "08:30", "10:15", "12:00", "13:45", "15:30", "17:15", "19:00",
    ]
    assert ticks[-1].position == 1.0

def test_time_of_day_scale_drops_ticks_past_maximum():
    # 100 minutes, step ceil(100 / 6) = 17: 0, 17, ..., 85 (102 is dropped)
    ticks = TimeOfDayScale(0, 100).ticks()
    assert len(ticks) == 6
    assert ticks[-1].label == "01:25"
    assert all(0 <= t.position <= 1 for t in ticks)

# -------------------------------
# Tests for DateScale
# -------------------------------

def test_date_scale_labels_distinct_dates():
    start = datetime.date(2024, 1, 1).toordinal()
    ordinals = [start + i for i in range(10)] + [start, start + 3]
    scale = DateScale(ordinals, target=6)
    labels = [t.label for t in scale.ticks()]
    assert labels == ["2024-01-01", "2024-01-03", "2024-01-05", "2024-01-07", "2024-01-09"]
    assert scale.normalize([start, start + 9]).tolist() == [0.0, 1.0]

def test_date_scale_single_date():
    ordinal = datetime.date(2024, 5, 17).toordinal()
    scale = DateScale([ordinal, ordinal])
    assert scale.normalize([ordinal]).tolist() == [0.5]
    assert [t.label for t in scale.ticks()] == ["2024-05-17"]

# -------------------------------
# Tests for build_chart_mapping
# -------------------------------

def test_build_chart_mapping_time_chart(sample_chart):
    mapping = build_chart_mapping(sample_chart)
    assert mapping.x_title == "Data Points"
    assert mapping.y_title == "Time"
    assert mapping.value_labels is None
    assert len(mapping.series) == 3
    for nx, ny in mapping.series:
        assert len(nx) == 12
        assert nx[0] == 0.0 and nx[-1] == 1.0
        assert ((ny >= 0) & (ny <= 1)).all()
    # Project Beta starts at the global minimum, Code Reviews ends at the maximum
    assert mapping.series[1][1][0] == 0.0
    assert mapping.series[2][1][-1] == 1.0
    assert len(mapping.x_scale.ticks()) == 6

def test_build_chart_mapping_category_chart_with_labels_and_max():
    chart = parse_chart({
        "title": "Scores",
        "labels": ["Q1", "Q2", "Q3"],
        "max": 10,
        "datasets": [{"label": "Team", "color": "#333333", "data": [5, {"value": 10}, 2.5]}],
    })
    mapping = build_chart_mapping(chart)
    nx, ny = mapping.series[0]
    assert nx.tolist() == [0.0, 0.5, 1.0]
    assert ny.tolist() == [0.5, 1.0, 0.25]
    assert mapping.value_labels == [["5", "10", "2.5"]]
    assert mapping.x_title == "Category"
    assert [t.label for t in mapping.x_scale.ticks()] == ["Q1", "Q2", "Q3"]
    assert mapping.y_scale.ticks()[-1].label == "10"

def test_build_chart_mapping_date_chart():
    chart = parse_chart({
        "title": "Daily",
        "datasets": [{
            "label": "Visits",
            "data": [
                {"date": "2024-01-01", "value": 3},
                {"date": "2024-01-03", "value": 6},
                {"date": "2024-01-05", "value": 9},
            ],
        }],
    })
    mapping = build_chart_mapping(chart)
    nx, ny = mapping.series[0]
    assert nx.tolist() == [0.0, 0.5, 1.0]
    assert ny.tolist() == [0.0, 0.5, 1.0]
    assert (mapping.x_title, mapping.y_title) == ("Date", "Value")

def test_build_chart_mapping_single_point_dataset_is_centered():
    chart = parse_chart({"title": "One", "datasets": [{"label": "a", "data": [7]}]})
    (nx, ny), = build_chart_mapping(chart).series
    assert nx.tolist() == [0.5]
    assert ny.tolist() == [0.5]

def test_build_chart_mapping_without_points():
    chart = ChartSpec(title="Empty", datasets=(Dataset("a", "red"),))
    assert build_chart_mapping(chart) is None
