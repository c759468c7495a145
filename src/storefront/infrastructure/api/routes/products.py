"""Catalog routes. Reads are public; writes need an administrator token."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from storefront.domain.model.identity import Identity
from storefront.infrastructure.api.deps import get_container, get_identity
from storefront.infrastructure.api.schemas import (
    ProductCreateRequest,
    ProductResponse,
    ProductUpdateRequest,
    StockLevelResponse,
    StockRequest,
)
from storefront.infrastructure.bootstrap import Container

router = APIRouter(prefix="/api/products", tags=["products"])


@router.get("", response_model=list[ProductResponse])
def list_products(
    category: str | None = Query(default=None),
    search: str | None = Query(default=None),
    container: Container = Depends(get_container),
):
    products = container.browse_catalog.list_products(category=category, search=search)
    return [ProductResponse.model_validate(p) for p in products]


@router.get("/{product_id}", response_model=ProductResponse)
def get_product(product_id: str, container: Container = Depends(get_container)):
    return ProductResponse.model_validate(container.browse_catalog.get_product(product_id))


@router.post("", status_code=201, response_model=ProductResponse)
def create_product(
    body: ProductCreateRequest,
    identity: Identity = Depends(get_identity),
    container: Container = Depends(get_container),
):
    product = container.add_product.handle(
        identity,
        title=body.title,
        price=str(body.price),
        category=body.category,
        description=body.description,
        image_url=body.image_url,
        stock=body.stock,
    )
    return ProductResponse.model_validate(product)


@router.put("/{product_id}", response_model=ProductResponse)
def update_product(
    product_id: str,
    body: ProductUpdateRequest,
    identity: Identity = Depends(get_identity),
    container: Container = Depends(get_container),
):
    product = container.update_product.handle(
        identity,
        product_id,
        title=body.title,
        description=body.description,
        price=str(body.price) if body.price is not None else None,
        category=body.category,
        image_url=body.image_url,
    )
    return ProductResponse.model_validate(product)


@router.delete("/{product_id}")
def delete_product(
    product_id: str,
    identity: Identity = Depends(get_identity),
    container: Container = Depends(get_container),
) -> dict:
    container.delete_product.handle(identity, product_id)
    return {"message": "Product deleted successfully"}


@router.put("/{product_id}/stock", response_model=StockLevelResponse)
def set_stock(
    product_id: str,
    body: StockRequest,
    identity: Identity = Depends(get_identity),
    container: Container = Depends(get_container),
):
    level = container.set_stock.handle(identity, product_id, body.quantity)
    return StockLevelResponse.model_validate(level)
