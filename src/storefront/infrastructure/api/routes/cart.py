"""Cart routes: customer-only, gated inside the handlers."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from storefront.domain.model.identity import Identity
from storefront.infrastructure.api.deps import get_container, get_identity
from storefront.infrastructure.api.schemas import (
    AddCartItemRequest,
    CartLineResponse,
    CartResponse,
    ClearedResponse,
    RemovedResponse,
    UpdateCartItemRequest,
)
from storefront.infrastructure.bootstrap import Container

router = APIRouter(prefix="/api/cart", tags=["cart"])


@router.get("", response_model=CartResponse)
def get_cart(
    identity: Identity = Depends(get_identity),
    container: Container = Depends(get_container),
):
    return CartResponse.model_validate(container.show_cart.handle(identity))


@router.post("", status_code=201, response_model=CartLineResponse)
def add_to_cart(
    body: AddCartItemRequest,
    identity: Identity = Depends(get_identity),
    container: Container = Depends(get_container),
):
    line = container.add_to_cart.handle(identity, body.product_id, body.quantity)
    return CartLineResponse.model_validate(line)


@router.put("/{product_id}", response_model=CartLineResponse | RemovedResponse)
def update_cart_item(
    product_id: str,
    body: UpdateCartItemRequest,
    identity: Identity = Depends(get_identity),
    container: Container = Depends(get_container),
):
    result = container.update_cart_item.handle(identity, product_id, body.quantity)
    if isinstance(result, bool):
        return RemovedResponse(removed=result)
    return CartLineResponse.model_validate(result)


@router.delete("/{product_id}", response_model=RemovedResponse)
def remove_from_cart(
    product_id: str,
    identity: Identity = Depends(get_identity),
    container: Container = Depends(get_container),
):
    return RemovedResponse(removed=container.remove_from_cart.handle(identity, product_id))


@router.delete("", response_model=ClearedResponse)
def clear_cart(
    identity: Identity = Depends(get_identity),
    container: Container = Depends(get_container),
):
    return ClearedResponse(removed=container.clear_cart.handle(identity))
