"""
Command line interface for wraptext.

Examples:
    echo "The quick brown fox jumped over the lazy dog" | wraptext wrap --width 10
    wraptext shorten --width 11 "Hello  world, how are you?"
    wraptext serve --port 8000
"""

import argparse
import logging
import sys
from typing import List, Optional

import wraptext.config as config
from wraptext import utils
from wraptext.config import WrapConfigError, WrapOptions
from wraptext.wrapper import TextWrapper

logger = logging.getLogger(__name__)

WRAP_COMMANDS = ("wrap", "fill", "shorten")


def add_wrap_options(parser: argparse.ArgumentParser):
    """Flags mirroring WrapOptions fields. Unset flags keep the preset's value."""
    parser.add_argument("--preset", help="Named option preset from config.json")
    parser.add_argument("--width", type=int, help="Target line width")
    parser.add_argument("--tab-size", dest="tab_size", type=int, help="Spaces per tab")
    parser.add_argument(
        "--no-expand-tabs", dest="expand_tabs", action="store_false", default=None,
        help="Keep tabs instead of expanding them",
    )
    parser.add_argument(
        "--no-replace-whitespace", dest="replace_whitespace", action="store_false", default=None,
        help="Keep newlines and other whitespace as-is",
    )
    parser.add_argument(
        "--keep-whitespace", dest="drop_whitespace", action="store_false", default=None,
        help="Keep whitespace at the start and end of lines",
    )
    parser.add_argument("--initial-indent", dest="initial_indent", help="Prefix for the first line")
    parser.add_argument(
        "--subsequent-indent", dest="subsequent_indent", help="Prefix for the following lines"
    )
    parser.add_argument(
        "--fix-sentence-endings", dest="fix_sentence_endings", action="store_true", default=None,
        help="Put two spaces after sentence endings",
    )
    parser.add_argument(
        "--no-break-long-words", dest="break_long_words", action="store_false", default=None,
        help="Never split words longer than a line",
    )
    parser.add_argument(
        "--no-break-on-hyphens", dest="break_on_hyphens", action="store_false", default=None,
        help="Keep hyphenated words whole",
    )
    parser.add_argument("--max-lines", dest="max_lines", type=int, help="Maximum number of lines")
    parser.add_argument("--placeholder", help="Marker appended to truncated text")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="wraptext", description="Wrap, fill and shorten text for fixed-width output."
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default from settings)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    for command in WRAP_COMMANDS:
        sub = subparsers.add_parser(command, help=f"{command} text (reads stdin when TEXT is omitted)")
        sub.add_argument("text", nargs="?", help="Input text")
        add_wrap_options(sub)

    sub = subparsers.add_parser("dedent", help="Remove common leading whitespace")
    sub.add_argument("text", nargs="?", help="Input text")

    sub = subparsers.add_parser("indent", help="Prefix every non-blank line")
    sub.add_argument("prefix", help="Prefix to add")
    sub.add_argument("text", nargs="?", help="Input text")

    sub = subparsers.add_parser("center", help="Pad text on both sides")
    sub.add_argument("width", type=int, help="Target width")
    sub.add_argument("text", nargs="?", help="Input text")
    sub.add_argument("--pad", default=" ", help="Pad character (default: space)")

    sub = subparsers.add_parser("serve", help="Run the HTTP API")
    sub.add_argument("--host", default=None, help="Bind address (default from settings)")
    sub.add_argument("--port", type=int, default=None, help="Port (default from settings)")

    return parser.parse_args(argv)


def options_from_args(args: argparse.Namespace) -> WrapOptions:
    """Resolve the preset, then apply any flags the user set."""
    options = config.settings.resolve_options(args.preset)
    overrides = {
        name: value
        for name, value in vars(args).items()
        if name in WrapOptions.model_fields and value is not None
    }
    if overrides:
        options = options.with_overrides(**overrides)
    return options


def read_text(args: argparse.Namespace) -> str:
    if args.text is not None:
        return args.text
    return sys.stdin.read()


def run_serve(args: argparse.Namespace):
    import uvicorn

    host = args.host or config.settings.host
    port = args.port or config.settings.port
    logger.info(f"Serving wraptext on {host}:{port}")
    uvicorn.run("wraptext.main:app", host=host, port=port)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=(args.log_level or config.settings.log_level).upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "serve":
        run_serve(args)
        return 0

    try:
        if args.command in WRAP_COMMANDS:
            try:
                options = options_from_args(args)
            except KeyError:
                print(f"error: unknown preset {args.preset!r}", file=sys.stderr)
                return 2
            wrapper = TextWrapper(options)
            text = read_text(args)
            if args.command == "wrap":
                for line in wrapper.wrap(text):
                    print(line)
            else:
                print(getattr(wrapper, args.command)(text))
        elif args.command == "dedent":
            sys.stdout.write(utils.dedent(read_text(args)))
        elif args.command == "indent":
            sys.stdout.write(utils.indent(read_text(args), args.prefix))
        elif args.command == "center":
            print(utils.center(read_text(args), args.pad, args.width))
    except (WrapConfigError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    return 0


if __name__ == "__main__":
    sys.exit(main())
