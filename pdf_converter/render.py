"""Rendering through PyMuPDF (fitz) and Pillow."""

import enum
import io
from pathlib import Path

import fitz
from PIL import Image

from pdf_converter.errors import InputError, RenderError

PDF_SIGNATURE = b"%PDF-"
SIGNATURE_WINDOW = 1024

# MuPDF errors derive from FzErrorBase, not RuntimeError
LIBRARY_ERRORS = (RuntimeError, ValueError, fitz.mupdf.FzErrorBase)


class Format(enum.Enum):
    PNG = "png"
    SVG = "svg"

    @property
    def extension(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        return self.value.upper()


def open_document(path: Path) -> fitz.Document:
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise InputError(f"Failed to read input file: {exc}") from exc

    # PDF readers accept the header anywhere in the first KiB
    if PDF_SIGNATURE not in data[:SIGNATURE_WINDOW]:
        raise InputError("Input file is not a PDF", tag="FileType")

    try:
        doc = fitz.open(stream=data, filetype="pdf")
    except LIBRARY_ERRORS as exc:
        raise RenderError(f"Failed to read PDF: {exc}") from exc

    if doc.needs_pass:
        doc.close()
        raise RenderError("Failed to read PDF: document is password protected")
    return doc


def load_page(doc: fitz.Document, number: int) -> fitz.Page:
    try:
        return doc.load_page(number - 1)
    except (IndexError,) + LIBRARY_ERRORS as exc:
        raise RenderError(f"Failed to load page {number}: {exc}") from exc


def render_png(page: fitz.Page, scale: float) -> bytes:
    mat = fitz.Matrix(scale, scale)
    try:
        pix = page.get_pixmap(matrix=mat, alpha=False)
    except LIBRARY_ERRORS as exc:
        raise RenderError(f"Failed to render page {page.number + 1}: {exc}") from exc

    img = Image.frombytes("RGB", [pix.width, pix.height], pix.samples)
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()


def render_svg(page: fitz.Page, scale: float) -> str:
    try:
        return page.get_svg_image(matrix=fitz.Matrix(scale, scale))
    except LIBRARY_ERRORS as exc:
        raise RenderError(f"Failed to render page {page.number + 1}: {exc}") from exc


def render_page(page: fitz.Page, fmt: Format, scale: float) -> bytes:
    if fmt is Format.PNG:
        return render_png(page, scale)
    return render_svg(page, scale).encode("utf-8")
