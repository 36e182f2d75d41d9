import argparse
import math
import sys
from pathlib import Path

from pdf_converter import __version__
from pdf_converter.config import Config
from pdf_converter.converter import Options, convert
from pdf_converter.errors import ConversionError, OutputError
from pdf_converter.logger_config import configure_logging, get_logger
from pdf_converter.pages import parse_page_list
from pdf_converter.render import Format

logger = get_logger(__name__)


def positive_float(text: str) -> float:
    try:
        value = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid scale: '{text}'")
    if not math.isfinite(value) or value <= 0:
        raise argparse.ArgumentTypeError(f"scale must be a positive number, got '{text}'")
    return value


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="pdf-converter", description="Convert PDF files to PNG or SVG"
    )
    ap.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    ap.add_argument("-q", "--quiet", action="store_true",
                    help="Suppress informational logging (only errors printed)")
    ap.add_argument("-p", "--page", dest="pages", metavar="PAGE", type=parse_page_list,
                    action="extend", default=[],
                    help="Choose pages to convert. You can provide multiple page numbers separated by commas")
    ap.add_argument("-s", "--scale", type=positive_float, default=Config.DEFAULT_SCALE,
                    help="Scale factor applied to outputs (default: %(default)s)")
    ap.add_argument("--prefix", help="Prefix for output files. If omitted, inferred from the input name")
    ap.add_argument("format", metavar="FORMAT", type=str.lower,
                    choices=[f.value for f in Format], help="Output format (png or svg)")
    ap.add_argument("input", metavar="INPUT", type=Path, help="Input PDF file")
    ap.add_argument("output", metavar="OUTPUT", type=Path, nargs="?",
                    default=Path(Config.DEFAULT_OUTPUT), help="Output directory (default: %(default)s)")
    return ap


def prepare_output_dir(output: Path) -> None:
    existed = output.exists()
    try:
        output.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise OutputError(f"Failed to create output directory: {exc}") from exc
    if not existed:
        logger.info(f"[Output] Created output directory: {output}")


def main(argv=None) -> int:
    configure_logging()
    # parse even on bad config so --help and --version keep working
    config_ok = Config.load()
    args = build_parser().parse_args(argv)
    if not config_ok:
        logger.error("[Config] Configuration validation failed")
        return 1

    options = Options(
        format=Format(args.format),
        input=args.input,
        output=args.output,
        pages=args.pages,
        scale=args.scale,
        prefix=args.prefix,
        quiet=args.quiet,
    )
    configure_logging(quiet=options.quiet, level=Config.LOG_LEVEL)
    try:
        prepare_output_dir(options.output)
        convert(options)
    except ConversionError as exc:
        logger.error(f"[{exc.tag}] {exc}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
