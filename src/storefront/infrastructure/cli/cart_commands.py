"""CLI commands for a customer's cart."""

from __future__ import annotations

import click

from storefront.infrastructure.cli.options import acting_identity, container_from, domain_errors


@click.command("add")
@click.option("--product", "product_id", required=True, help="Product id.")
@click.option("--quantity", default=1, type=int, show_default=True, help="Units to add.")
@acting_identity(default_role="customer")
@click.pass_context
@domain_errors
def cart_add(ctx, identity, product_id: str, quantity: int) -> None:
    """Add units of a product to the cart."""
    line = container_from(ctx).add_to_cart.handle(identity, product_id, quantity)
    click.echo(f"Cart now holds {line.quantity} x {line.product_id}")


@click.command("set")
@click.option("--product", "product_id", required=True, help="Product id.")
@click.option("--quantity", required=True, type=int, help="New quantity (0 removes the line).")
@acting_identity(default_role="customer")
@click.pass_context
@domain_errors
def cart_set(ctx, identity, product_id: str, quantity: int) -> None:
    """Replace the quantity of a cart line."""
    result = container_from(ctx).update_cart_item.handle(identity, product_id, quantity)
    if result is True:
        click.echo(f"Removed {product_id} from cart")
    elif result is False:
        click.echo(f"{product_id} was not in the cart")
    else:
        click.echo(f"Cart now holds {result.quantity} x {result.product_id}")


@click.command("remove")
@click.option("--product", "product_id", required=True, help="Product id.")
@acting_identity(default_role="customer")
@click.pass_context
@domain_errors
def cart_remove(ctx, identity, product_id: str) -> None:
    """Remove a product from the cart."""
    removed = container_from(ctx).remove_from_cart.handle(identity, product_id)
    click.echo(f"Removed {product_id} from cart" if removed else f"{product_id} was not in the cart")


@click.command("clear")
@acting_identity(default_role="customer")
@click.pass_context
@domain_errors
def cart_clear(ctx, identity) -> None:
    """Empty the cart."""
    count = container_from(ctx).clear_cart.handle(identity)
    click.echo(f"Cart cleared ({count} line(s) removed)")


@click.command("show")
@acting_identity(default_role="customer")
@click.pass_context
@domain_errors
def cart_show(ctx, identity) -> None:
    """Show the cart with current prices."""
    cart = container_from(ctx).show_cart.handle(identity)

    if cart.is_empty:
        click.echo("Cart is empty.")
        return

    click.echo(f"  {'Product':<28} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*55}")
    for item in cart.items:
        click.echo(
            f"  {item.title:<28} {item.quantity:>5} {str(item.unit_price):>10} {str(item.line_total):>10}"
        )
    click.echo(f"  {'-'*55}")
    click.echo(f"  {'Subtotal':<35} {str(cart.subtotal):>20}")
