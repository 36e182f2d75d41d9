"""Drive a conversion: open, select pages, render, write."""

from dataclasses import dataclass, field
from pathlib import Path

from pdf_converter.errors import OutputError
from pdf_converter.logger_config import get_logger
from pdf_converter.naming import output_path, resolve_prefix
from pdf_converter.pages import select_pages
from pdf_converter.render import Format, load_page, open_document, render_page

logger = get_logger(__name__)


@dataclass(frozen=True)
class Options:
    format: Format
    input: Path
    output: Path = Path(".")
    pages: list[int] = field(default_factory=list)
    scale: float = 1.0
    prefix: str | None = None
    quiet: bool = False


def convert(options: Options) -> int:
    """Render the selected pages and return how many files were written.

    Pages are validated before anything is rendered, so an out-of-range
    request leaves the output directory untouched.
    """
    doc = open_document(options.input)
    try:
        selected = select_pages(options.pages, doc.page_count)
        prefix = resolve_prefix(options.prefix, options.input)
        ext = options.format.extension

        written = 0
        for number in selected:
            data = render_page(load_page(doc, number), options.format, options.scale)
            out = output_path(options.output, prefix, number, ext)
            try:
                out.write_bytes(data)
            except OSError as exc:
                raise OutputError(f"Failed to write {options.format.label}: {exc}") from exc
            logger.info(f"[Output] Wrote {out}")
            written += 1
    finally:
        doc.close()

    suffix = "" if written == 1 else "s"
    logger.info(
        f"[Output] Wrote {written} {options.format.label} file{suffix} "
        f"to {options.output} (input: {options.input})"
    )
    return written
