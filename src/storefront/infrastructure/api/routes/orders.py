"""Order routes: checkout and order history for the signed-in customer."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from storefront.domain.model.identity import Identity
from storefront.infrastructure.api.deps import get_container, get_identity
from storefront.infrastructure.api.schemas import OrderResponse, ShippingRequest
from storefront.infrastructure.bootstrap import Container

router = APIRouter(prefix="/api/orders", tags=["orders"])


@router.post("", status_code=201, response_model=OrderResponse)
def place_order(
    body: ShippingRequest,
    identity: Identity = Depends(get_identity),
    container: Container = Depends(get_container),
):
    order = container.place_order.handle(identity, body.model_dump())
    return OrderResponse.model_validate(order)


@router.get("", response_model=list[OrderResponse])
def list_orders(
    identity: Identity = Depends(get_identity),
    container: Container = Depends(get_container),
):
    return [OrderResponse.model_validate(o) for o in container.list_orders.handle(identity)]
