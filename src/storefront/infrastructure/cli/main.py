import click

from storefront.domain.exceptions import DomainException
from storefront.domain.model.identity import Identity, Role
from storefront.infrastructure.auth.tokens import issue_token
from storefront.infrastructure.cli.cart_commands import (
    cart_add,
    cart_clear,
    cart_remove,
    cart_set,
    cart_show,
)
from storefront.infrastructure.cli.options import container_from
from storefront.infrastructure.cli.order_commands import order_list, order_place
from storefront.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_update,
    stock_set,
    stock_show,
)
from storefront.infrastructure.config import get_settings
from storefront.infrastructure.logging_setup import configure_logging


@click.group()
@click.option("--log-level", default=None, help="Override the configured log level.")
def cli(log_level: str | None) -> None:
    """Storefront: catalog, cart and checkout"""
    configure_logging(log_level or get_settings().log_level)


@cli.group()
def db() -> None:
    """Manage the database."""


@cli.group()
def token() -> None:
    """Issue access tokens."""


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def stock() -> None:
    """Manage stock levels."""


@cli.group()
def cart() -> None:
    """Manage a customer's cart."""


@cli.group()
def order() -> None:
    """Place and list orders."""


@db.command("init")
@click.pass_context
def db_init(ctx) -> None:
    """Create all tables (idempotent)."""
    container_from(ctx).init_db()
    click.echo("Database initialized")


@db.command("seed")
@click.pass_context
def db_seed(ctx) -> None:
    """Load the demo catalog into an empty store."""
    try:
        count = container_from(ctx).seed_catalog.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))
    if count:
        click.echo(f"Seeded {count} products")
    else:
        click.echo("Catalog already populated, nothing to seed")


@token.command("issue")
@click.option("--user", "user_id", required=True, help="User id for the token subject.")
@click.option("--role", type=click.Choice([r.value for r in Role]), default=Role.CUSTOMER.value, show_default=True)
@click.option("--ttl", type=int, default=None, help="Lifetime in seconds.")
@click.pass_context
def token_issue(ctx, user_id: str, role: str, ttl: int | None) -> None:
    """Print a bearer token for the given identity."""
    root = ctx.find_root()
    settings = root.obj.settings if root.obj is not None else get_settings()
    click.echo(issue_token(Identity(user_id=user_id, role=Role.parse(role)), settings, ttl))


@cli.command("serve")
@click.option("--host", default=None, help="Bind address.")
@click.option("--port", default=None, type=int, help="Bind port.")
@click.pass_context
def serve(ctx, host: str | None, port: int | None) -> None:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    from storefront.infrastructure.api.app import create_app

    container = container_from(ctx)
    settings = container.settings
    uvicorn.run(
        create_app(container),
        host=host or settings.api_host,
        port=port or settings.api_port,
        log_level=settings.log_level.lower(),
    )


# Register subcommands
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_update)
product.add_command(product_delete)
stock.add_command(stock_set)
stock.add_command(stock_show)
cart.add_command(cart_add)
cart.add_command(cart_set)
cart.add_command(cart_remove)
cart.add_command(cart_clear)
cart.add_command(cart_show)
order.add_command(order_place)
order.add_command(order_list)
