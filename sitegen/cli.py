"""Command-line interface for sitegen.

Usage::

    sitegen generate "a cozy bakery for my town"
    sitegen generate "portfolio for a designer" --ai --json
    sitegen list --store ./websites.json
    sitegen show 3f2a...
    sitegen templates
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import Optional, Sequence

from .config import Config
from .editor import navigation
from .exceptions import InvalidInputError, NotFoundError, StoreError
from .generator.rules import SECTION_TEMPLATES
from .models import GenerationResult
from .service import WebsiteService
from .store import JsonWebsiteStore
from .utils import console, print_error, print_sections_table, print_success, print_summary_table

STORE_HELP = (
    "Path to the website store JSON file "
    "(default: $SITEGEN_STORE_PATH or ./.sitegen/websites.json)"
)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sitegen",
        description="sitegen -- turn a business idea into website sections",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            '  sitegen generate "a cozy bakery for my town"\n'
            '  sitegen generate "portfolio for a designer" --ai\n'
            "  sitegen list\n"
        ),
    )
    parser.add_argument("--store", default=None, help=STORE_HELP)

    # Accepted after the subcommand too; SUPPRESS keeps the top-level value.
    store_parent = argparse.ArgumentParser(add_help=False)
    store_parent.add_argument("--store", default=argparse.SUPPRESS, help=STORE_HELP)

    subparsers = parser.add_subparsers(dest="command", required=True)

    gen = subparsers.add_parser(
        "generate", parents=[store_parent], help="Generate sections for an idea"
    )
    gen.add_argument("idea", help="Short description of the business or website")
    gen.add_argument("--ai", action="store_true", help="Use the model backend when configured")
    gen.add_argument("--json", action="store_true", help="Print the stored result as JSON")

    subparsers.add_parser(
        "list", parents=[store_parent], help="List stored generations, newest first"
    )

    show = subparsers.add_parser(
        "show", parents=[store_parent], help="Show one stored generation"
    )
    show.add_argument("id", help="Generation id")
    show.add_argument("--json", action="store_true", help="Print the result as JSON")

    subparsers.add_parser("templates", help="List the section templates")
    return parser


def _print_result(result: GenerationResult, as_json: bool) -> None:
    if as_json:
        console.print_json(json.dumps(result.model_dump(mode="json")))
        return
    print_summary_table(
        {
            "ID": result.id,
            "Idea": result.idea,
            "Created": result.created_at.isoformat(),
            "Generated by": result.generated_by,
            "Navigation": "  ".join(href for _, href in navigation(result.sections)),
        },
        title="Website",
    )
    print_sections_table(result.sections)


async def _run(args: argparse.Namespace, service: WebsiteService) -> int:
    if args.command == "generate":
        try:
            result = await service.generate_website(args.idea)
        except InvalidInputError as exc:
            print_error(f"Error: {exc}")
            return 1
        _print_result(result, args.json)
        if not args.json:
            print_success(f"Saved website {result.id}")
        return 0

    if args.command == "list":
        websites = await service.list_websites()
        if not websites:
            console.print("[dim]No websites generated yet.[/dim]")
            return 0
        print_summary_table(
            {w.id: f"{w.created_at:%Y-%m-%d %H:%M}  {w.idea}" for w in websites},
            title="Websites",
        )
        return 0

    if args.command == "show":
        try:
            result = await service.get_website(args.id)
        except NotFoundError as exc:
            print_error(f"Error: {exc}")
            return 1
        _print_result(result, args.json)
        return 0

    print_summary_table({t.name: t.placeholder for t in SECTION_TEMPLATES}, title="Section templates")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> None:
    """CLI entry point for ``sitegen`` and ``python -m sitegen``."""
    args = _build_parser().parse_args(argv)

    config = Config.from_env()
    if args.store:
        config.store_path = Path(args.store)
    if getattr(args, "ai", False):
        config.use_ai_generation = True

    service = WebsiteService(config, store=JsonWebsiteStore(config.store_path))
    try:
        exit_code = asyncio.run(_run(args, service))
    except StoreError as exc:
        print_error(f"Error: {exc}")
        sys.exit(1)
    if exit_code:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
