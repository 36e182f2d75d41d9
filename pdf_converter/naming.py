"""Output file naming."""

import re
from pathlib import Path

SEP = "-"
FALLBACK_PREFIX = "rendered"

_UNSAFE_RE = re.compile(r"[^A-Za-z0-9_.-]+")
_SEP_RUN_RE = re.compile(r"-{2,}")


def sanitize_prefix(text: str) -> str:
    """Keep ASCII letters, digits, '-', '_' and '.'; everything else becomes '-'."""
    text = _UNSAFE_RE.sub(SEP, text)
    return _SEP_RUN_RE.sub(SEP, text).strip(SEP)


def resolve_prefix(prefix: str | None, input_path: Path) -> str:
    """Prefix for output files, always ending with a single '-'.

    An explicit prefix wins; otherwise the input file's stem is used.
    Falls back to 'rendered' when sanitizing leaves nothing.
    """
    base = sanitize_prefix(prefix if prefix is not None else Path(input_path).stem)
    if not base:
        base = FALLBACK_PREFIX
    return base + SEP


def output_path(output_dir: Path, prefix: str, page: int, ext: str) -> Path:
    return Path(output_dir) / f"{prefix}{page}.{ext}"
