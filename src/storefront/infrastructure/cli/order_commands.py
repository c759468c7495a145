"""CLI commands for checkout and order history."""

from __future__ import annotations

import click

from storefront.application.dto import OrderDTO
from storefront.infrastructure.cli.options import acting_identity, container_from, domain_errors


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    s = dto.shipping
    click.echo(f"Order #{dto.id}  ({dto.created_at:%Y-%m-%d %H:%M})")
    click.echo(f"Ship to: {s.first_name} {s.last_name}, {s.address}, {s.city} {s.state} {s.zip_code}")
    click.echo()
    click.echo(f"  {'Product':<28} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*55}")
    for line in dto.lines:
        click.echo(
            f"  {line.product_title:<28} {line.quantity:>5} "
            f"{str(line.unit_price):>10} {str(line.line_total):>10}"
        )
    click.echo(f"  {'-'*55}")
    click.echo(f"  {'Order Total':<35} {str(dto.total):>20}")


@click.command("place")
@click.option("--first-name", required=True)
@click.option("--last-name", required=True)
@click.option("--email", required=True)
@click.option("--address", required=True)
@click.option("--city", required=True)
@click.option("--state", required=True)
@click.option("--zip-code", required=True)
@acting_identity(default_role="customer")
@click.pass_context
@domain_errors
def order_place(ctx, identity, **shipping: str) -> None:
    """Check out the cart as a new order."""
    dto = container_from(ctx).place_order.handle(identity, shipping)
    click.echo("Order placed successfully")
    _display_order(dto)


@click.command("list")
@acting_identity(default_role="customer")
@click.pass_context
@domain_errors
def order_list(ctx, identity) -> None:
    """List your orders, newest first."""
    orders = container_from(ctx).list_orders.handle(identity)

    if not orders:
        click.echo("No orders found.")
        return

    for i, dto in enumerate(orders):
        if i:
            click.echo()
        _display_order(dto)
