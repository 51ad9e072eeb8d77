"""Burrow CLI — burrow routes / burrow check / burrow dev / burrow serve.

Entry point for the ``burrow`` command-line interface.
"""

from __future__ import annotations

import argparse
import sys


def _add_route_options(parser: argparse.ArgumentParser) -> None:
    """Options shared by every command that builds a route table.

    Defaults are None so that values from burrow.toml / pyproject.toml are
    only overridden when a flag is actually given.
    """
    parser.add_argument("root", nargs="?", default=".", help="Project root directory")
    parser.add_argument("--routes-dir", default=None, help="Routes tree under src/")
    parser.add_argument("--prefix", default=None, help="URL prefix for every route")
    parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Fail on dynamic route conflicts instead of warning",
    )


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the burrow CLI."""
    parser = argparse.ArgumentParser(
        prog="burrow",
        description="Directory-based routing for chirp apps.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {_get_version()}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # burrow routes
    routes_parser = subparsers.add_parser("routes", help="Print the route table")
    _add_route_options(routes_parser)

    # burrow check
    check_parser = subparsers.add_parser(
        "check",
        help="Build the route table and report errors (exit 1 on failure)",
    )
    _add_route_options(check_parser)

    # burrow dev
    dev_parser = subparsers.add_parser("dev", help="Start development server")
    _add_route_options(dev_parser)
    dev_parser.add_argument("--host", default=None, help="Bind address")
    dev_parser.add_argument("--port", type=int, default=None, help="Bind port")

    # burrow serve
    serve_parser = subparsers.add_parser("serve", help="Run live production server")
    _add_route_options(serve_parser)
    serve_parser.add_argument("--host", default="0.0.0.0", help="Bind address")
    serve_parser.add_argument("--port", type=int, default=8000, help="Bind port")
    serve_parser.add_argument("--workers", type=int, default=0, help="Worker count (0=auto)")

    return parser


def _get_version() -> str:
    """Get the package version."""
    from burrow import __version__

    return __version__


def _route_overrides(args: argparse.Namespace) -> dict[str, object]:
    return {
        "routes_dir": args.routes_dir,
        "prefix": args.prefix,
        "strict": args.strict,
    }


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    from burrow._errors import BurrowError
    from burrow.app import dev, serve, show_routes

    overrides = _route_overrides(args)
    try:
        if args.command in ("routes", "check"):
            table = show_routes(root=args.root, **overrides)
            if args.command == "check" and table.conflicts:
                count = len(table.conflicts)
                print(
                    f"  {count} conflict{'s' if count != 1 else ''} ignored "
                    "(use --strict to fail)",
                    file=sys.stderr,
                )
        elif args.command == "dev":
            dev(root=args.root, host=args.host, port=args.port, **overrides)
        elif args.command == "serve":
            serve(
                root=args.root,
                host=args.host,
                port=args.port,
                workers=args.workers,
                **overrides,
            )
    except BurrowError as exc:
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
