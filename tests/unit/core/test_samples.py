from profilereport import get_sample_data


def test_sample_data_structure():
    data = get_sample_data()
    assert data["person"]["name"] == "John Smith"
    assert len(data["pages"]) == 2
    first, second = data["pages"]
    assert [(s["title"], s["type"]) for s in first["sections"]] == [
        ("Project Information", "table"),
        ("Performance Chart", "chart"),
    ]
    assert [(s["title"], s["type"]) for s in second["sections"]] == [
        ("Skills & Experience", "table"),
    ]

def test_sample_data_chart_has_three_time_series():
    chart = get_sample_data()["pages"][0]["sections"][1]["data"]
    assert chart["title"] == "Daily Work Time Tracking"
    assert [d["color"] for d in chart["datasets"]] == ["#3498db", "#e74c3c", "#2ecc71"]
    assert all(len(d["data"]) == 12 for d in chart["datasets"])
    assert all("timeValue" in p for d in chart["datasets"] for p in d["data"])

def test_sample_data_returns_fresh_copies():
    data = get_sample_data()
    data["pages"].clear()
    data["person"]["name"] = "Changed"
    fresh = get_sample_data()
    assert len(fresh["pages"]) == 2
    assert fresh["person"]["name"] == "John Smith"
