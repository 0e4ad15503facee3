from __future__ import annotations

import uuid
from decimal import Decimal
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status

from common.mediator import Mediator
from product_service.core.security import require_caller_id
from product_service.db.models import Product
from product_service.domain.ownership import Access, check_ownership
from product_service.domain.search import ProductSearchCriteria
from product_service.schemas import (
    PRICE_DECIMAL_PLACES,
    PRICE_MAX_DIGITS,
    CreateProductRequest,
    ProductResponse,
    UpdateProductRequest,
)
from product_service.services.commands import CreateProduct, UpdateProduct, build_mediator
from product_service.services.product_service import ProductNotFoundError, ProductService

router = APIRouter(prefix="/api/products", tags=["products"])

_DENIED_STATUS = {
    Access.UNAUTHENTICATED: status.HTTP_401_UNAUTHORIZED,
    Access.FORBIDDEN: status.HTTP_403_FORBIDDEN,
}


def get_product_service() -> ProductService:
    return ProductService()


def get_mediator(service: ProductService = Depends(get_product_service)) -> Mediator:
    return build_mediator(service)


def _load_owned_product(service: ProductService, product_id: uuid.UUID, caller_id: uuid.UUID) -> Product:
    product = service.get_product_by_id(product_id)
    if product is None or product.is_deleted:
        raise HTTPException(status.HTTP_404_NOT_FOUND, "Product not found.")
    access = check_ownership(product.created_by_user_id, caller_id)
    if access is not Access.ALLOWED:
        raise HTTPException(_DENIED_STATUS[access], "You do not own this product.")
    return product


@router.get("", response_model=list[ProductResponse])
def list_products(
    caller_id: uuid.UUID = Depends(require_caller_id),
    service: ProductService = Depends(get_product_service),
):
    return service.get_products_by_user_id(caller_id)


@router.get("/search", response_model=list[ProductResponse])
def search_products(
    name: Optional[str] = Query(default=None),
    min_price: Optional[Decimal] = Query(
        default=None,
        alias="minPrice",
        ge=0,
        max_digits=PRICE_MAX_DIGITS,
        decimal_places=PRICE_DECIMAL_PLACES,
    ),
    max_price: Optional[Decimal] = Query(
        default=None,
        alias="maxPrice",
        ge=0,
        max_digits=PRICE_MAX_DIGITS,
        decimal_places=PRICE_DECIMAL_PLACES,
    ),
    is_available: Optional[bool] = Query(default=None, alias="isAvailable"),
    caller_id: uuid.UUID = Depends(require_caller_id),
    service: ProductService = Depends(get_product_service),
):
    criteria = ProductSearchCriteria(
        name=name,
        min_price=min_price,
        max_price=max_price,
        is_available=is_available,
    )
    return service.search_products(criteria, owner_id=caller_id)


@router.get("/{product_id}", response_model=ProductResponse, name="get_product")
def get_product(
    product_id: uuid.UUID,
    caller_id: uuid.UUID = Depends(require_caller_id),
    service: ProductService = Depends(get_product_service),
):
    return _load_owned_product(service, product_id, caller_id)


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
def create_product(
    payload: CreateProductRequest,
    request: Request,
    response: Response,
    caller_id: uuid.UUID = Depends(require_caller_id),
    mediator: Mediator = Depends(get_mediator),
):
    product = mediator.send(
        CreateProduct(
            name=payload.name,
            description=payload.description,
            price=payload.price,
            is_available=payload.is_available,
            created_by_user_id=caller_id,
        )
    )
    response.headers["Location"] = str(request.url_for("get_product", product_id=str(product.id)))
    return product


@router.put("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_product(
    product_id: uuid.UUID,
    payload: UpdateProductRequest,
    caller_id: uuid.UUID = Depends(require_caller_id),
    service: ProductService = Depends(get_product_service),
    mediator: Mediator = Depends(get_mediator),
):
    _load_owned_product(service, product_id, caller_id)
    try:
        mediator.send(
            UpdateProduct(
                id=product_id,
                name=payload.name,
                description=payload.description,
                price=payload.price,
                is_available=payload.is_available,
            )
        )
    except ProductNotFoundError as exc:
        raise HTTPException(status.HTTP_404_NOT_FOUND, str(exc))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(
    product_id: uuid.UUID,
    caller_id: uuid.UUID = Depends(require_caller_id),
    service: ProductService = Depends(get_product_service),
):
    _load_owned_product(service, product_id, caller_id)
    try:
        service.delete_product(product_id)
    except ProductNotFoundError as exc:
        raise HTTPException(status.HTTP_404_NOT_FOUND, str(exc))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# Bulk status endpoints called by the user service with the caller's own token.
@router.put("/deactivate/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def deactivate_products_by_user(
    user_id: uuid.UUID,
    caller_id: uuid.UUID = Depends(require_caller_id),
    service: ProductService = Depends(get_product_service),
):
    service.set_products_deletion_status(user_id, True)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put("/activate/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def activate_products_by_user(
    user_id: uuid.UUID,
    caller_id: uuid.UUID = Depends(require_caller_id),
    service: ProductService = Depends(get_product_service),
):
    service.set_products_deletion_status(user_id, False)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
