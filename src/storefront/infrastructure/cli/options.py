"""Shared CLI plumbing: the acting identity, the container and error mapping."""

from __future__ import annotations

import functools
from typing import Callable

import click

from storefront.domain.exceptions import DomainException
from storefront.domain.model.identity import Identity, Role
from storefront.infrastructure.bootstrap import Container


def container_from(ctx: click.Context) -> Container:
    root = ctx.find_root()
    if root.obj is None:
        root.obj = Container()
        root.obj.init_db()
    return root.obj


def acting_identity(default_role: str) -> Callable:
    """Add ``--user``/``--role`` options and pass an Identity as ``identity``."""

    def decorator(func: Callable) -> Callable:
        @click.option("--user", "user_id", required=True, help="Acting user id.")
        @click.option(
            "--role",
            type=click.Choice([r.value for r in Role]),
            default=default_role,
            show_default=True,
            help="Acting role.",
        )
        @functools.wraps(func)
        def wrapper(*args, user_id: str, role: str, **kwargs):
            identity = Identity(user_id=user_id, role=Role.parse(role))
            return func(*args, identity=identity, **kwargs)

        return wrapper

    return decorator


def domain_errors(func: Callable) -> Callable:
    """Turn DomainException into a ClickException with the same message."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except DomainException as exc:
            raise click.ClickException(f"[{exc.kind}] {exc.message}")

    return wrapper
