"""
Command-line front end: ``minibash ls`` and ``minibash serve``.
"""

import argparse
import logging
import sys
from collections.abc import Callable

from minibash.config.settings import ServerSettings, Settings, validate_port
from minibash.container import container
from minibash.entities.listing import ListingOptions, ListingResult, SingleListing
from minibash.exceptions import ConfigurationError, ListError

logger = logging.getLogger(__name__)


def format_listing(result: ListingResult) -> str:
    """Render a listing result as a single output line."""
    if isinstance(result, SingleListing):
        return result.name
    return " ".join(result.names)


def _run_ls(args: argparse.Namespace) -> int:
    options = ListingOptions(show_hidden=args.almost_all, sort_by_time=args.time)
    try:
        result = container.get_list_directory_use_case().execute(args.path, options)
    except ListError as e:
        print(f"minibash: ls: {e}", file=sys.stderr)
        return 1
    print(format_listing(result))
    return 0


def _run_serve(args: argparse.Namespace) -> int:
    import uvicorn

    try:
        settings = ServerSettings()
        host = args.host if args.host is not None else settings.host
        port = (
            validate_port(args.port, "--port")
            if args.port is not None
            else settings.port
        )
    except ConfigurationError as e:
        print(f"minibash: serve: {e}", file=sys.stderr)
        return 2
    logger.info(f"Serving on {host}:{port}")
    uvicorn.run("minibash.app:app", host=host, port=port, reload=settings.reload)  # type: ignore[arg-type]
    return 0


_COMMANDS: dict[str, Callable[[argparse.Namespace], int]] = {
    "ls": _run_ls,
    "serve": _run_serve,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="minibash",
        description="A small re-implementation of the Unix ls utility.",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    ls_parser = subparsers.add_parser("ls", help="List files in a directory.")
    ls_parser.add_argument(
        "-A",
        "--almost-all",
        action="store_true",
        help="Include directory entries whose names begin with a dot ('.') except for . and ..",
    )
    ls_parser.add_argument(
        "-t", "--time", action="store_true", help="Sort by descending time modified"
    )
    ls_parser.add_argument(
        "path",
        nargs="?",
        default=".",
        metavar="PATH",
        help="The path of the directory to list files from. Defaults to the current directory.",
    )

    serve_parser = subparsers.add_parser("serve", help="Serve the listing HTTP API.")
    serve_parser.add_argument("--host", default=None, help="Bind host")
    serve_parser.add_argument("--port", type=int, default=None, help="Bind port")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = Settings()
    except ConfigurationError as e:
        print(f"minibash: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
    return _COMMANDS[args.command](args)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
