import os
from unittest import mock

import fitz
import pytest

from pdf_converter.config import Config

PAGE_WIDTH = 200
PAGE_HEIGHT = 100


@pytest.fixture(autouse=True)
def clean_config():
    # load_dotenv writes straight into os.environ
    with mock.patch.dict(os.environ):
        for key in ("PDF_CONVERTER_SCALE", "PDF_CONVERTER_OUTPUT", "PDF_CONVERTER_LOG_LEVEL"):
            os.environ.pop(key, None)
        Config.reset()
        yield
    Config.reset()


@pytest.fixture
def make_pdf(tmp_path):
    def _make(pages=4, name="sample.pdf"):
        path = tmp_path / name
        doc = fitz.open()
        for i in range(pages):
            page = doc.new_page(width=PAGE_WIDTH, height=PAGE_HEIGHT)
            page.insert_text((20, 50), f"Page {i + 1}")
        doc.save(str(path))
        doc.close()
        return path
    return _make


@pytest.fixture
def sample_pdf(make_pdf):
    return make_pdf()
