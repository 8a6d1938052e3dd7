import base64
import logging
from dataclasses import replace

import pytest

from profilereport import LayoutConfig
from profilereport.renderers import draw_logo, render_footer, render_header
from profilereport.surfaces import RecordingSurface

PNG_PIXEL = base64.b64decode(
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mP8z8BQDwAEhQGAhKmMIQAAAABJRU5ErkJggg=="
)


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def missing_logo_layout(tmp_path):
    return replace(LayoutConfig(), logo_path=str(tmp_path / "missing.jpeg"))


@pytest.fixture
def logo_layout(tmp_path):
    path = tmp_path / "logo.png"
    path.write_bytes(PNG_PIXEL)
    return replace(LayoutConfig(), logo_path=str(path))


# -------------------------------
# Tests for render_header
# -------------------------------

def test_header_draws_logos_when_available(surface, logo_layout):
    render_header(surface, logo_layout)
    images = list(surface.iter_commands("image"))
    assert [(i.params["x"], i.params["y"]) for i in images] == [
        (50.0, 30.0),
        (surface.width - 110, 30.0),
    ]
    assert all((i.params["w"], i.params["h"]) == (60.0, 40.0) for i in images)
    assert "LOGO" not in surface.texts()

def test_header_falls_back_to_placeholders(surface, missing_logo_layout, caplog):
    with caplog.at_level(logging.WARNING):
        render_header(surface, missing_logo_layout)

    assert list(surface.iter_commands("image")) == []
    rects = [c.params for c in surface.iter_commands("rect")]
    assert [(r["x"], r["y"], r["w"], r["h"]) for r in rects] == [
        (50.0, 30.0, 60.0, 40.0),
        (surface.width - 110, 30.0, 60.0, 40.0),
    ]
    captions = [c.params for c in surface.iter_commands("text") if c.params["text"] == "LOGO"]
    assert [(c["x"], c["y"], c["size"]) for c in captions] == [
        (65.0, 48.0, 8),
        (surface.width - 95, 48.0, 8),
    ]
    assert caplog.text.count("using placeholder") == 2

def test_header_without_configured_logo(surface):
    layout = replace(LayoutConfig(), logo_path=None)
    assert draw_logo(surface, 50, 30, layout) is False
    render_header(surface, layout)
    assert surface.texts().count("LOGO") == 2

def test_header_title_and_rule(surface, missing_logo_layout):
    render_header(surface, missing_logo_layout)
    title = next(c.params for c in surface.iter_commands("text")
                 if c.params["text"] == "BrainWave Technologies")
    assert (title["x"], title["y"], title["size"]) == (0.0, 45.0, 16)
    assert (title["width"], title["align"]) == (surface.width, "center")
    (rule,) = [c.params for c in surface.iter_commands("line")]
    assert (rule["x1"], rule["y1"], rule["x2"], rule["y2"]) == (
        50.0, 90.0, surface.width - 50, 90.0,
    )

def test_header_custom_title(surface, missing_logo_layout):
    render_header(surface, replace(missing_logo_layout, title="Acme Corp"))
    assert "Acme Corp" in surface.texts()

# -------------------------------
# Tests for render_footer
# -------------------------------

def test_footer_text_and_position(surface):
    render_footer(surface, 2, 3)
    (footer,) = [c.params for c in surface.iter_commands("text")]
    assert footer["text"] == "Page 2 of 3"
    assert footer["y"] == pytest.approx(surface.height - 30)
    assert (footer["size"], footer["align"], footer["width"]) == (10, "center", surface.width)
