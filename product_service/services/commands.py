"""Write-side commands for products and their handlers."""
from __future__ import annotations

import uuid
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from common.mediator import Mediator
from product_service.db.models import Product
from product_service.services.product_service import ProductNotFoundError, ProductService


@dataclass(frozen=True)
class CreateProduct:
    name: str
    description: Optional[str]
    price: Decimal
    is_available: bool
    created_by_user_id: uuid.UUID


@dataclass(frozen=True)
class UpdateProduct:
    id: uuid.UUID
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[Decimal] = None
    is_available: Optional[bool] = None


class CreateProductHandler:
    def __init__(self, service: ProductService):
        self.service = service

    def handle(self, command: CreateProduct) -> Product:
        product = Product(
            id=uuid.uuid4(),
            name=command.name,
            description=command.description or "",
            price=command.price,
            is_available=command.is_available,
            created_by_user_id=command.created_by_user_id,
        )
        return self.service.add_product(product)


class UpdateProductHandler:
    """Apply only the fields that were supplied; the owner never changes."""

    def __init__(self, service: ProductService):
        self.service = service

    def handle(self, command: UpdateProduct) -> Product:
        product = self.service.get_product_by_id(command.id)
        if product is None:
            raise ProductNotFoundError(command.id)
        if command.name is not None:
            product.name = command.name
        if command.description is not None:
            product.description = command.description
        if command.price is not None:
            product.price = command.price
        if command.is_available is not None:
            product.is_available = command.is_available
        return self.service.update_product(product)


def build_mediator(service: ProductService) -> Mediator:
    mediator = Mediator()
    mediator.register(CreateProduct, CreateProductHandler(service).handle)
    mediator.register(UpdateProduct, UpdateProductHandler(service).handle)
    return mediator
