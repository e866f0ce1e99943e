"""
fdfgen command line - Convert a JSON object into an FDF file.

    fdfgen fields.json                 # writes fields.fdf
    fdfgen fields.json -o out.fdf
    cat fields.json | fdfgen - > out.fdf
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from fdfgen import __version__
from fdfgen.errors import FDFError
from fdfgen.api import encode, write
from fdfgen.spec import EXTENSION

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fdfgen",
        description="Generate an FDF file from a JSON object of form field values.",
    )
    parser.add_argument("input", help="JSON file with one object of field: value pairs ('-' for stdin)")
    parser.add_argument("-o", "--output", help=f"Output path (default: input with {EXTENSION})")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _load_fields(source: str) -> object:
    if source == "-":
        raw = sys.stdin.read()
    else:
        raw = Path(source).read_text(encoding="utf-8")
    return json.loads(raw)


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        data = _load_fields(args.input)
        if args.output is None and args.input == "-":
            sys.stdout.buffer.write(encode(data))
            sys.stdout.buffer.flush()
            return 0
        output = args.output or str(Path(args.input).with_suffix(EXTENSION))
        if args.input != "-" and Path(output).resolve() == Path(args.input).resolve():
            print(f"fdfgen: refusing to overwrite input file {args.input}", file=sys.stderr)
            return 1
        written = write(data, output)
    except json.JSONDecodeError as e:
        print(f"fdfgen: invalid JSON in {args.input}: {e}", file=sys.stderr)
        return 1
    except UnicodeDecodeError as e:
        print(f"fdfgen: invalid input in {args.input}: {e}", file=sys.stderr)
        return 1
    except FDFError as e:
        print(f"fdfgen: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"fdfgen: {e}", file=sys.stderr)
        return 1

    logger.info("Wrote %d bytes to %s", written, output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
