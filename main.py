# main.py

"""Entry point for the product catalog (TUI or headless CLI)."""

import argparse
import asyncio
import logging
import sys

from catalog.config.logging_config import setup_logging
from catalog.config.settings import Settings

logger = logging.getLogger("catalog.main")

_FIELD_FLAGS: list[tuple[str, str, str]] = [
    ("--title", "title", "Product title (min 3 characters)."),
    ("--description", "description", "Description (min 10 characters)."),
    ("--image-url", "image_url", "Image URL."),
    ("--external-url", "external_url", "Marketplace listing URL."),
    ("--category", "category", "Category name."),
    ("--price", "price", "Price (non-negative number)."),
]


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="catalog",
        description="Product catalog browser and admin.",
        epilog="Run without a command to launch the interactive TUI.",
    )
    sub = parser.add_subparsers(dest="command")

    list_cmd = sub.add_parser("list", help="List products.")
    list_cmd.add_argument(
        "-c",
        "--category",
        default=Settings.ALL_CATEGORIES,
        help=f"Category to show (default: {Settings.ALL_CATEGORIES}).",
    )
    list_cmd.add_argument(
        "-f",
        "--format",
        choices=["json", "table"],
        default="table",
        dest="output_format",
        help="Output format (default: table).",
    )

    sub.add_parser("categories", help="List categories.")

    add_cmd = sub.add_parser("add", help="Add a product.")
    for flag, dest, help_text in _FIELD_FLAGS:
        add_cmd.add_argument(flag, dest=dest, required=True, help=help_text)

    update_cmd = sub.add_parser("update", help="Edit a product.")
    update_cmd.add_argument("product_id", help="Id of the product.")
    for flag, dest, help_text in _FIELD_FLAGS:
        update_cmd.add_argument(flag, dest=dest, default=None, help=help_text)

    remove_cmd = sub.add_parser("remove", help="Delete a product.")
    remove_cmd.add_argument("product_id", help="Id of the product.")

    sub.add_parser("reset", help="Restore the default products.")
    return parser


def _run_tui() -> None:
    """Launch the interactive Textual TUI."""
    from catalog.ui.app import CatalogApp

    try:
        app = CatalogApp()
        app.run()
    except Exception:
        logger.critical("Fatal error during TUI run", exc_info=True)
        raise
    finally:
        logger.info("catalog TUI shutting down")


def _run_cli(args: argparse.Namespace) -> None:
    """Run one headless command and exit with its status."""
    from catalog.cli import runner

    fields = {dest: getattr(args, dest, None) for _, dest, _ in _FIELD_FLAGS}

    if args.command == "list":
        coro = runner.list_products(args.category, args.output_format)
    elif args.command == "categories":
        coro = runner.list_categories()
    elif args.command == "add":
        coro = runner.add_product(fields)
    elif args.command == "update":
        coro = runner.update_product(args.product_id, fields)
    elif args.command == "remove":
        coro = runner.remove_product(args.product_id)
    else:
        coro = runner.reset_catalog()

    sys.exit(asyncio.run(coro))


def main() -> None:
    """Route to the TUI (no command) or a headless command."""
    parser = _build_parser()
    args = parser.parse_args()

    log_file = setup_logging(console=args.command is not None)
    logger.info("catalog starting, log file: %s", log_file)

    if args.command is None:
        _run_tui()
    else:
        _run_cli(args)


if __name__ == "__main__":
    main()
