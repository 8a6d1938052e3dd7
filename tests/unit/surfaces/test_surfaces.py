import base64
import logging
from io import BytesIO

import pytest
from pypdf import PdfReader
from reportlab.lib.pagesizes import A4, LETTER

from profilereport.surfaces import (
    DrawCommand,
    DrawingSurface,
    RecordingSurface,
    ReportLabSurface,
    resolve_font,
)

# 1x1 opaque PNG
PNG_PIXEL = base64.b64decode(
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mP8z8BQDwAEhQGAhKmMIQAAAABJRU5ErkJggg=="
)


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def png_file(tmp_path):
    path = tmp_path / "logo.png"
    path.write_bytes(PNG_PIXEL)
    return path


# -------------------------------
# Tests for resolve_font
# -------------------------------

def test_resolve_font_standard_font():
    assert resolve_font("Helvetica") == "Helvetica"
    assert resolve_font("Times-Roman") == "Times-Roman"

def test_resolve_font_unknown_font_raises():
    with pytest.raises(ValueError, match="There is no font"):
        resolve_font("NoSuchFont")

# -------------------------------
# Tests for RecordingSurface
# -------------------------------

def test_recording_surface_is_a_drawing_surface(surface):
    assert isinstance(surface, DrawingSurface)
    assert (surface.width, surface.height) == A4
    assert surface.page_count == 1
    assert surface.current_page == 1

def test_recording_surface_custom_page_size():
    surface = RecordingSurface(page_size=LETTER)
    assert surface.width == LETTER[0]

def test_recording_surface_records_primitives(surface):
    surface.draw_text("Title", 10, 20, size=14)
    surface.draw_rect(0, 0, 5, 5, fill="red")
    surface.draw_line(0, 0, 10, 10, color="#cccccc")
    surface.draw_circle(3, 4, 2)
    ops = [c.op for c in surface.iter_commands()]
    assert ops == ["text", "rect", "line", "circle"]
    text = next(surface.iter_commands("text"))
    assert text == DrawCommand("text", {
        "text": "Title", "x": 10.0, "y": 20.0, "size": 14,
        "width": None, "align": "left", "color": "black",
    })

def test_recording_surface_pages_and_selection(surface):
    surface.draw_text("first", 0, 0)
    surface.new_page()
    surface.draw_text("second", 0, 0)
    assert surface.page_count == 2
    assert surface.current_page == 2

    surface.select_page(1)
    surface.draw_text("footer 1", 0, 800)
    assert surface.texts(page=1) == ["first", "footer 1"]
    assert surface.texts(page=2) == ["second"]
    assert surface.texts() == ["first", "footer 1", "second"]

@pytest.mark.parametrize("number", [0, 3, -1])
def test_recording_surface_select_page_out_of_range(surface, number):
    surface.new_page()
    with pytest.raises(IndexError, match="does not exist"):
        surface.select_page(number)

def test_measure_text_height_single_and_wrapped(surface):
    assert surface.measure_text_height("short", 350, size=10) == pytest.approx(12.0)
    long_text = "word " * 200
    lines = len(surface.wrap_text(long_text, 350, 10))
    assert lines > 1
    assert surface.measure_text_height(long_text, 350, size=10) == pytest.approx(lines * 12.0)

def test_wrap_text_without_width_splits_lines(surface):
    assert surface.wrap_text("a\nb", None, 10) == ["a", "b"]

def test_draw_image_records_loaded_image(surface, png_file):
    surface.draw_image(png_file, 50, 30, 60, 40)
    image = next(surface.iter_commands("image"))
    assert image.params["source"] == str(png_file)
    assert image.params["image"].getSize() == (1, 1)

def test_draw_image_missing_file_raises_eagerly(surface, tmp_path):
    with pytest.raises(Exception):
        surface.draw_image(tmp_path / "missing.jpeg", 50, 30, 60, 40)
    assert list(surface.iter_commands("image")) == []

# -------------------------------
# Tests for ReportLabSurface
# -------------------------------

def test_reportlab_surface_finalize_writes_every_page():
    surface = ReportLabSurface(title="Unit")
    surface.draw_text("Hello page one", 50, 50, size=12)
    surface.draw_rect(50, 100, 100, 50)
    surface.draw_circle(60, 200, 2, fill="#3498db")
    surface.new_page()
    surface.draw_text("Hello page two", 50, 50, width=200, align="center")
    surface.select_page(1)
    surface.draw_text("Footer text", 0, 800, width=surface.width, align="right")

    pdf_bytes = surface.finalize()
    assert pdf_bytes[:5] == b"%PDF-"
    reader = PdfReader(BytesIO(pdf_bytes))
    assert len(reader.pages) == 2
    first = reader.pages[0].extract_text()
    assert "Hello page one" in first
    assert "Footer text" in first
    assert "Hello page two" in reader.pages[1].extract_text()
    assert reader.metadata.title == "Unit"

def test_reportlab_surface_draws_images(png_file):
    surface = ReportLabSurface()
    surface.draw_image(png_file, 50, 30, 60, 40)
    assert surface.finalize()[:5] == b"%PDF-"

def test_reportlab_surface_unknown_color_falls_back_to_black(caplog):
    surface = ReportLabSurface()
    surface.draw_line(0, 0, 10, 10, color="brandBlue")
    surface.draw_circle(20, 20, 2, fill="brandBlue")
    surface.draw_text("Still rendered", 50, 50, color="brandBlue")
    with caplog.at_level(logging.WARNING, logger="profilereport"):
        pdf_bytes = surface.finalize()
    assert "Still rendered" in PdfReader(BytesIO(pdf_bytes)).pages[0].extract_text()
    # reported once per token
    assert caplog.text.count("Unknown color 'brandBlue'") == 1
