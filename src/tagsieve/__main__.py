"""Command-line entry point.

Run:
  python -m tagsieve page.html                     # default allow-lists
  python -m tagsieve --tags p,a --attributes href  # replace the tag/attribute lists
  cat page.html | python -m tagsieve --report      # print findings to stderr
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import Configuration
from .errors import UnsafeHtmlError
from .sanitize import sanitize


def _name_list(value: str) -> list[str]:
    return [part.strip() for part in value.split(",") if part.strip()]


def parse_args(argv: list[str]) -> argparse.Namespace:
    """Parse CLI arguments."""
    parser = argparse.ArgumentParser(prog="tagsieve", add_help=True, description="Sanitize HTML against allow-lists.")
    parser.add_argument("path", nargs="?", default="-", help="HTML file to read ('-' or omitted: stdin).")
    parser.add_argument("--tags", type=_name_list, default=None, help="Comma-separated tags replacing the defaults.")
    parser.add_argument(
        "--attributes", type=_name_list, default=None, help="Comma-separated attributes replacing the defaults."
    )
    parser.add_argument(
        "--scriptable",
        type=_name_list,
        default=None,
        help="Comma-separated scriptable attributes replacing the defaults.",
    )
    parser.add_argument("--supplement-tags", type=_name_list, default=None, help="Tags added to the defaults.")
    parser.add_argument(
        "--supplement-attributes", type=_name_list, default=None, help="Attributes added to the defaults."
    )
    parser.add_argument(
        "--supplement-scriptable",
        type=_name_list,
        default=None,
        help="Scriptable attributes added to the defaults.",
    )
    parser.add_argument("--document", action="store_true", help="Parse input as a full document.")
    parser.add_argument("--strict", action="store_true", help="Fail with status 1 on the first finding.")
    parser.add_argument("--report", action="store_true", help="Print each finding to stderr.")
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> Configuration:
    return Configuration(
        custom_tags=args.tags,
        custom_attributes=args.attributes,
        custom_scriptable_attributes=args.scriptable,
        supplemental_tags=args.supplement_tags,
        supplemental_attributes=args.supplement_attributes,
        supplemental_scriptable_attributes=args.supplement_scriptable,
        document=args.document,
        unsafe_handling="raise" if args.strict else "strip",
    )


def main(argv: list[str] | None = None) -> int:
    """Sanitize one input to stdout; returns the process exit status."""
    args = parse_args(sys.argv[1:] if argv is None else argv)
    config = build_config(args)

    if args.path == "-":
        markup = sys.stdin.read()
    else:
        markup = Path(args.path).read_text(encoding="utf-8")

    def _print_finding(msg: str, *, node: object | None = None) -> None:
        print(msg, file=sys.stderr)

    try:
        output = sanitize(markup, config=config, report=_print_finding if args.report else None)
    except UnsafeHtmlError as exc:
        print(f"Unsafe input: {exc}", file=sys.stderr)
        return 1

    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
