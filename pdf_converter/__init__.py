"""Convert PDF pages to PNG or SVG files."""

__version__ = "0.1.0"
