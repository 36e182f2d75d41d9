import io
import re

import fitz
import pytest
from PIL import Image

from pdf_converter.errors import InputError, RenderError
from pdf_converter.render import (
    Format, load_page, open_document, render_page, render_png, render_svg,
)

PAGE_WIDTH = 200
PAGE_HEIGHT = 100


def _svg_size(svg):
    width = float(re.search(r'width="([0-9.]+)', svg).group(1))
    height = float(re.search(r'height="([0-9.]+)', svg).group(1))
    return width, height


def test_open_document(sample_pdf):
    doc = open_document(sample_pdf)
    try:
        assert doc.page_count == 4
    finally:
        doc.close()


def test_open_missing_file(tmp_path):
    with pytest.raises(InputError) as excinfo:
        open_document(tmp_path / "missing.pdf")
    assert excinfo.value.tag == "FileSystem"


def test_open_non_pdf(tmp_path):
    path = tmp_path / "notes.pdf"
    path.write_text("just some text")
    with pytest.raises(InputError) as excinfo:
        open_document(path)
    assert excinfo.value.tag == "FileType"


def test_open_encrypted_pdf(tmp_path):
    path = tmp_path / "locked.pdf"
    doc = fitz.open()
    doc.new_page()
    doc.save(str(path), encryption=fitz.PDF_ENCRYPT_AES_256, owner_pw="owner", user_pw="user")
    doc.close()
    with pytest.raises(RenderError):
        open_document(path)


def test_png_scales_proportionally(sample_pdf):
    doc = open_document(sample_pdf)
    try:
        base = Image.open(io.BytesIO(render_png(doc[0], 1.0)))
        scaled = Image.open(io.BytesIO(render_png(doc[0], 2.5)))
    finally:
        doc.close()
    assert base.format == "PNG"
    assert base.size == (PAGE_WIDTH, PAGE_HEIGHT)
    assert scaled.size == (PAGE_WIDTH * 5 // 2, PAGE_HEIGHT * 5 // 2)


def test_svg_scales_proportionally(sample_pdf):
    doc = open_document(sample_pdf)
    try:
        base = render_svg(doc[0], 1.0)
        scaled = render_svg(doc[0], 2.0)
    finally:
        doc.close()
    assert base.lstrip().startswith("<")
    assert "<svg" in base
    w1, h1 = _svg_size(base)
    w2, h2 = _svg_size(scaled)
    assert w2 == pytest.approx(w1 * 2)
    assert h2 == pytest.approx(h1 * 2)


def test_render_page_returns_bytes(sample_pdf):
    doc = open_document(sample_pdf)
    try:
        png = render_page(doc[1], Format.PNG, 1.0)
        svg = render_page(doc[1], Format.SVG, 1.0)
    finally:
        doc.close()
    assert png.startswith(b"\x89PNG")
    assert b"<svg" in svg


def test_library_failure_becomes_render_error(sample_pdf):
    doc = open_document(sample_pdf)
    try:
        with pytest.raises(RenderError) as excinfo:
            render_png(doc[0], 1e6)
    finally:
        doc.close()
    assert excinfo.value.tag == "PDF"
    assert str(excinfo.value).startswith("Failed to render page 1:")


def test_load_page_out_of_document(sample_pdf):
    doc = open_document(sample_pdf)
    try:
        assert load_page(doc, 2).number == 1
        with pytest.raises(RenderError):
            load_page(doc, 99)
    finally:
        doc.close()
