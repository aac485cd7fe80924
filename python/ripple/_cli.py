"""CLI entry point that renders the demo applications to stdout."""

import argparse
import sys

from pydantic import ValidationError

from ripple.config import get_settings
from ripple.contacts import Contact
from ripple.errors import RippleError
from ripple.log import configure_logging, get_logger
from ripple.runtime import Root
from ripple.signals import WindowSource

logger = get_logger(__name__)


def parse_size(value: str) -> tuple[int, int]:
    """Parse WIDTHxHEIGHT, e.g. 800x600."""
    try:
        width, height = (int(part) for part in value.lower().split("x"))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected WIDTHxHEIGHT, got {value!r}") from None
    if width < 0 or height < 0:
        raise argparse.ArgumentTypeError(f"dimensions must be non-negative, got {value!r}")
    return width, height


def parse_contact(value: str) -> Contact:
    """Parse FIRST,LAST,PHONE."""
    parts = value.split(",")
    if len(parts) != 3:
        raise argparse.ArgumentTypeError(f"expected FIRST,LAST,PHONE, got {value!r}")
    first_name, last_name, phone = (part.strip() for part in parts)
    return Contact(first_name=first_name, last_name=last_name, phone=phone)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ripple", description="Render ripple demo components.")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Override RIPPLE_LOG_LEVEL",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    counters = commands.add_parser("counters", help="Click (+10) and hover (+5) counters")
    counters.add_argument("--clicks", type=int, default=0, metavar="N")
    counters.add_argument("--hovers", type=int, default=0, metavar="N")

    window = commands.add_parser("window", help="Window size observer")
    window.add_argument(
        "--resize",
        type=parse_size,
        action="append",
        default=[],
        metavar="WxH",
        help="Emit a resize event (repeatable)",
    )

    phonebook = commands.add_parser("phonebook", help="Phone book sorted by last name")
    phonebook.add_argument(
        "--add",
        type=parse_contact,
        action="append",
        default=[],
        metavar="FIRST,LAST,PHONE",
        help="Submit a contact (repeatable)",
    )
    phonebook.add_argument(
        "--submit-defaults",
        action="store_true",
        help="Also submit the form once with its default values",
    )
    return parser


def render_counters(clicks: int, hovers: int) -> str:
    from ripple.demos import CounterApp

    with Root(CounterApp) as root:
        for _ in range(clicks):
            root.dispatch("click")
        for _ in range(hovers):
            root.dispatch("hover")
        return root.html


def render_window(resizes: list[tuple[int, int]]) -> str:
    from ripple.demos import WindowSizeApp

    settings = get_settings()
    source = WindowSource(settings.window_width, settings.window_height)
    with Root(WindowSizeApp, source=source) as root:
        for width, height in resizes:
            source.resize(width, height)
        return root.html


def render_phonebook(contacts: list[Contact], submit_defaults: bool) -> str:
    from ripple.demos import PhoneBook

    with Root(PhoneBook) as root:
        if submit_defaults:
            root.dispatch("submit")
        for contact in contacts:
            root.dispatch("add", contact)
        return root.html


def main(argv: list[str] | None = None) -> int:
    """Run the ripple CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = get_settings()
    configure_logging(args.log_level or settings.log_level, settings.log_json)

    try:
        if args.command == "counters":
            html = render_counters(args.clicks, args.hovers)
        elif args.command == "window":
            html = render_window(args.resize)
        else:
            html = render_phonebook(args.add, args.submit_defaults)
    except (RippleError, ValidationError) as e:
        logger.error("render failed", command=args.command, error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(html)
    return 0


if __name__ == "__main__":
    sys.exit(main())
