# catalog/cli/runner.py

"""Headless CLI commands built on the catalog service."""

import json
import logging
import sys
from dataclasses import replace
from pathlib import Path

from rich.console import Console
from rich.table import Table

from catalog.config.settings import Settings
from catalog.errors import CatalogError, InvalidProduct
from catalog.filters.product_validator import ProductValidator
from catalog.models.product import Product, new_product_id
from catalog.services.catalog_service import CatalogService

logger = logging.getLogger("catalog.cli")

# Stderr console for status messages so stdout stays clean for JSON
_err = Console(stderr=True)


def _print_table(products: list[Product], title: str) -> None:
    """Render a Rich table of products to stdout."""
    table = Table(
        title=title,
        show_lines=True,
        title_style="bold cyan",
    )
    table.add_column("ID", style="dim")
    table.add_column("Title", max_width=40)
    table.add_column("Category", style="magenta")
    table.add_column("Price", justify="right", style="green")
    table.add_column("Link", overflow="fold", style="dim")

    for p in products:
        table.add_row(
            p.id,
            p.title,
            p.category,
            f"${p.price:,.2f}",
            p.external_url,
        )

    Console().print(table)


def _report_invalid(exc: InvalidProduct) -> None:
    for field_name, message in exc.problems.items():
        _err.print(f"[red]{field_name}: {message}[/red]")


async def list_products(
    category: str,
    output_format: str,
    db_path: Path | None = None,
) -> int:
    """Print the products visible under *category*."""
    service = CatalogService(db_path)
    try:
        await service.load_all()
        visible = service.filter_by_category(category)
    finally:
        await service.close()

    if not visible:
        _err.print(f"[yellow]No products in '{category}'.[/yellow]")
        return 1

    if output_format == "table":
        label = (
            "All Products"
            if category == Settings.ALL_CATEGORIES
            else category
        )
        _print_table(visible, label)
    else:
        json.dump(
            [p.to_dict() for p in visible],
            sys.stdout,
            ensure_ascii=False,
            indent=2,
        )
        sys.stdout.write("\n")
    return 0


async def list_categories(db_path: Path | None = None) -> int:
    """Print one category per line, first-seen order."""
    service = CatalogService(db_path)
    try:
        await service.load_all()
        categories = service.list_categories()
    finally:
        await service.close()

    for name in categories:
        sys.stdout.write(f"{name}\n")
    return 0


async def add_product(
    fields: dict[str, str | None],
    db_path: Path | None = None,
) -> int:
    """Validate *fields*, assign a fresh id and add the product."""
    try:
        product = ProductValidator.build(
            new_product_id(),
            title=fields.get("title") or "",
            description=fields.get("description") or "",
            image_url=fields.get("image_url") or "",
            external_url=fields.get("external_url") or "",
            category=fields.get("category") or "",
            price=fields.get("price") or "",
        )
    except InvalidProduct as exc:
        _report_invalid(exc)
        return 1

    service = CatalogService(db_path)
    try:
        await service.add(product)
    except CatalogError as exc:
        logger.error("Add failed: %s", exc, exc_info=True)
        _err.print(f"[red]Add failed: {exc}[/red]")
        return 1
    finally:
        await service.close()

    _err.print(f"[green]✓ Added '{product.title}' (id={product.id})[/green]")
    return 0


async def update_product(
    product_id: str,
    changes: dict[str, str | None],
    db_path: Path | None = None,
) -> int:
    """Apply *changes* (``None`` keeps a field) to an existing product."""
    service = CatalogService(db_path)
    try:
        await service.load_all()
        current = service.get(product_id)
        if current is None:
            _err.print(f"[red]No product with id {product_id}.[/red]")
            return 1

        merged = replace(
            current,
            **{k: v for k, v in changes.items() if v is not None},
        )
        try:
            product = ProductValidator.build(
                merged.id,
                title=merged.title,
                description=merged.description,
                image_url=merged.image_url,
                external_url=merged.external_url,
                category=merged.category,
                price=merged.price,
            )
        except InvalidProduct as exc:
            _report_invalid(exc)
            return 1

        await service.update(product)
    except CatalogError as exc:
        logger.error("Update failed: %s", exc, exc_info=True)
        _err.print(f"[red]Update failed: {exc}[/red]")
        return 1
    finally:
        await service.close()

    _err.print(f"[green]✓ Updated '{product.title}'[/green]")
    return 0


async def remove_product(
    product_id: str,
    db_path: Path | None = None,
) -> int:
    """Delete a product by id."""
    service = CatalogService(db_path)
    try:
        await service.remove(product_id)
    except CatalogError as exc:
        logger.error("Remove failed: %s", exc, exc_info=True)
        _err.print(f"[red]Remove failed: {exc}[/red]")
        return 1
    finally:
        await service.close()

    _err.print(f"[green]✓ Removed id={product_id}[/green]")
    return 0


async def reset_catalog(db_path: Path | None = None) -> int:
    """Wipe the store and restore the default products."""
    service = CatalogService(db_path)
    try:
        products = await service.reset_to_defaults()
    except CatalogError as exc:
        logger.error("Reset failed: %s", exc, exc_info=True)
        _err.print(f"[red]Reset failed: {exc}[/red]")
        return 1
    finally:
        await service.close()

    _err.print(f"[green]✓ Restored {len(products)} default products[/green]")
    return 0
