"""CLI commands for the product catalog and stock levels."""

from __future__ import annotations

import click

from storefront.infrastructure.cli.options import acting_identity, container_from, domain_errors


@click.command("add")
@click.option("--title", required=True, help="Product title.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--category", required=True, help="Product category.")
@click.option("--description", default="", help="Short description.")
@click.option("--image-url", default=None, help="Image URL.")
@click.option("--stock", default=0, type=int, show_default=True, help="Initial stock level.")
@click.option("--id", "product_id", default=None, help="Explicit product id.")
@acting_identity(default_role="administrator")
@click.pass_context
@domain_errors
def product_add(ctx, identity, title, price, category, description, image_url, stock, product_id) -> None:
    """Add a new product to the catalog."""
    product = container_from(ctx).add_product.handle(
        identity,
        title=title,
        price=price,
        category=category,
        description=description,
        image_url=image_url,
        stock=stock,
        product_id=product_id,
    )
    click.echo(f"Product {product.id} '{product.title}' added at ${product.price} (stock {product.stock})")


@click.command("list")
@click.option("--category", default=None, help="Filter by category ('all' for every one).")
@click.option("--search", default=None, help="Match against title or description.")
@click.pass_context
@domain_errors
def product_list(ctx, category: str | None, search: str | None) -> None:
    """List products in the catalog."""
    products = container_from(ctx).browse_catalog.list_products(category=category, search=search)

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<38} {'Title':<28} {'Category':<12} {'Price':>10} {'Stock':>6}")
    click.echo("-" * 98)
    for p in products:
        click.echo(f"{p.id:<38} {p.title:<28} {p.category:<12} {str(p.price):>10} {p.stock:>6}")


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product id.")
@click.option("--title", default=None, help="New title.")
@click.option("--price", default=None, help="New price (e.g. 29.99).")
@click.option("--category", default=None, help="New category.")
@click.option("--description", default=None, help="New description.")
@click.option("--image-url", default=None, help="New image URL.")
@acting_identity(default_role="administrator")
@click.pass_context
@domain_errors
def product_update(ctx, identity, product_id, title, price, category, description, image_url) -> None:
    """Edit a product. Existing orders keep the price they were placed at."""
    product = container_from(ctx).update_product.handle(
        identity,
        product_id,
        title=title,
        description=description,
        price=price,
        category=category,
        image_url=image_url,
    )
    click.echo(f"Product {product.id} updated: '{product.title}' at ${product.price}")


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product id.")
@acting_identity(default_role="administrator")
@click.pass_context
@domain_errors
def product_delete(ctx, identity, product_id: str) -> None:
    """Remove a product from the catalog."""
    container_from(ctx).delete_product.handle(identity, product_id)
    click.echo(f"Product {product_id} deleted")


@click.command("set")
@click.option("--id", "product_id", required=True, help="Product id.")
@click.option("--quantity", required=True, type=int, help="New available quantity.")
@acting_identity(default_role="administrator")
@click.pass_context
@domain_errors
def stock_set(ctx, identity, product_id: str, quantity: int) -> None:
    """Set the available stock for a product."""
    level = container_from(ctx).set_stock.handle(identity, product_id, quantity)
    click.echo(f"Stock for '{level.title}' set to {level.available}")


@click.command("show")
@click.pass_context
@domain_errors
def stock_show(ctx) -> None:
    """Show stock levels for every product."""
    levels = container_from(ctx).show_stock.handle()

    if not levels:
        click.echo("No stock records found.")
        return

    click.echo(f"{'Product':<28} {'Available':>10}")
    click.echo("-" * 39)
    for level in levels:
        click.echo(f"{level.title:<28} {level.available:>10}")
