"""FastAPI dependencies: the container and the acting identity."""

from __future__ import annotations

from fastapi import Depends, Header, Request

from storefront.domain.model.identity import Identity
from storefront.infrastructure.auth.tokens import parse_authorization_header, verify_token
from storefront.infrastructure.bootstrap import Container


def get_container(request: Request) -> Container:
    return request.app.state.container


def get_identity(
    authorization: str | None = Header(default=None),
    container: Container = Depends(get_container),
) -> Identity:
    token = parse_authorization_header(authorization)
    return verify_token(token, container.settings)
