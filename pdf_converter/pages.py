"""Page list parsing and validation against the document's page count."""

import argparse

from pdf_converter.errors import PageRangeError


def parse_page_list(text: str) -> list[int]:
    """Parse '1,4,7' into [1, 4, 7].

    Zero is let through so that validation can report it next to any other
    out-of-range page.
    """
    pages = []
    for item in text.split(","):
        item = item.strip()
        if not item:
            continue
        try:
            page = int(item)
        except ValueError:
            raise argparse.ArgumentTypeError(f"invalid page number: '{item}'")
        if page < 0:
            raise argparse.ArgumentTypeError(f"invalid page number: '{item}'")
        pages.append(page)
    return pages


def select_pages(requested, page_count: int) -> list[int]:
    """Return the 1-based pages to render, in document order."""
    if not requested:
        return list(range(1, page_count + 1))

    invalid = sorted({p for p in requested if p < 1 or p > page_count})
    if invalid:
        listed = ", ".join(str(p) for p in invalid)
        raise PageRangeError(
            f"Invalid requested page(s): {listed}. "
            f"The page numbers must be between 1 and {page_count}."
        )
    return sorted(set(requested))
