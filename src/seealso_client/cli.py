"""CLI entrypoint for seealso-client."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from .config import DEFAULT_VIEW, ClientConfig
from .errors import ConfigError, SeeAlsoError
from .logging_utils import configure_logging, get_logger
from .pipeline import run_lookup, run_pipeline
from .transport import DEFAULT_WORKERS
from .validation import load_lines_from_file, parse_named_value
from .view import DEFAULT_MAX_ITEMS, VIEW_FLAVOURS


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--default-view",
        choices=sorted(VIEW_FLAVOURS),
        default=DEFAULT_VIEW,
        help="View flavour for elements without a view class.",
    )
    parser.add_argument(
        "--max-items",
        type=int,
        default=DEFAULT_MAX_ITEMS,
        help="Items shown before the overflow marker.",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Per-request timeout in seconds (default: wait indefinitely).",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    parser.add_argument("--quiet", action="store_true", help="Only log warnings and errors.")


def build_parser() -> argparse.ArgumentParser:
    """Build CLI parser."""
    parser = argparse.ArgumentParser(
        description="SeeAlso client - query link servers and render their responses as HTML."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    lookup = commands.add_parser("lookup", help="Query one identifier and print the result.")
    lookup.add_argument("identifier", help="Identifier to look up.")
    lookup.add_argument("--service", required=True, help="Base URL of the SeeAlso service.")
    lookup.add_argument(
        "--wire", action="store_true", help="Print the normalized response as JSON instead of HTML."
    )
    lookup.add_argument("--callback", help="Wrap --wire output in this JSONP callback.")
    _add_common_arguments(lookup)

    render = commands.add_parser("render", help="Resolve all SeeAlso tags in an HTML document.")
    render.add_argument("--input", required=True, help="HTML document to scan.")
    render.add_argument("--output", required=True, help="Where to write the rendered document.")
    render.add_argument(
        "--service",
        action="append",
        default=[],
        metavar="NAME=URL",
        help="Register a service under a class name (repeatable, first wins on overlap).",
    )
    render.add_argument(
        "--services-file", help="File with one NAME=URL service registration per line."
    )
    render.add_argument(
        "--view",
        action="append",
        default=[],
        metavar="NAME=FLAVOUR",
        help=f"Register a view class ({', '.join(sorted(VIEW_FLAVOURS))}).",
    )
    render.add_argument(
        "--workers", type=int, default=DEFAULT_WORKERS, help="Concurrent lookups in flight."
    )
    render.add_argument("--no-progress", action="store_true", help="Disable tqdm progress bars.")
    _add_common_arguments(render)
    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse and pre-validate CLI input."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command == "render" and not (args.service or args.services_file):
        parser.error("Provide --service or --services-file.")
    return args


def _materialize_services(args: argparse.Namespace) -> tuple[tuple[str, str], ...]:
    if args.command == "lookup":
        return (("service", args.service),)
    raw = list(args.service)
    if args.services_file:
        raw.extend(load_lines_from_file(args.services_file))
    return tuple(parse_named_value(item) for item in raw)


def namespace_to_config(args: argparse.Namespace) -> ClientConfig:
    """Convert CLI args to validated ClientConfig."""
    render = args.command == "render"
    return ClientConfig(
        services=_materialize_services(args),
        views=tuple(parse_named_value(item) for item in args.view) if render else (),
        default_view=args.default_view,
        input=args.input if render else None,
        output=args.output if render else None,
        workers=args.workers if render else 1,
        request_timeout=args.timeout,
        max_items=args.max_items,
        show_progress=not args.no_progress if render else False,
    )


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entrypoint."""
    args = parse_args(argv)
    configure_logging(args.verbose, args.quiet)
    logger = get_logger()
    try:
        config = namespace_to_config(args)
    except ConfigError as exc:
        logger.error("Invalid configuration: %s", exc)
        return 2

    if args.command == "lookup":
        try:
            result, html = run_lookup(config, args.identifier, logger=logger)
        except (SeeAlsoError, ValueError) as exc:
            logger.error("Lookup failed: %s", exc)
            return 1
        print(result.to_wire(args.callback) if args.wire else html)
        return 0

    output = run_pipeline(config, logger=logger)
    logger.info("Wrote rendered document to %s", output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
