"""Application service for products."""
from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field
from typing import Optional

from product_service.db.models import Product
from product_service.domain.search import ProductSearchCriteria
from product_service.repositories.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class ProductNotFoundError(LookupError):
    def __init__(self, product_id: uuid.UUID):
        super().__init__(f"Product '{product_id}' not found.")
        self.product_id = product_id


@dataclass
class ProductService:
    repository: ProductRepository = field(default_factory=ProductRepository)

    def get_products_by_user_id(self, user_id: uuid.UUID) -> list[Product]:
        return self.repository.list_by_owner(user_id)

    def get_product_by_id(self, product_id: uuid.UUID) -> Optional[Product]:
        return self.repository.get(product_id)

    def add_product(self, product: Product) -> Product:
        created = self.repository.add(product)
        logger.info("Product %s created by user %s", created.id, created.created_by_user_id)
        return created

    def update_product(self, product: Product) -> Product:
        return self.repository.update(product)

    def delete_product(self, product_id: uuid.UUID) -> None:
        if not self.repository.delete(product_id):
            raise ProductNotFoundError(product_id)
        logger.info("Product %s deleted", product_id)

    def set_products_deletion_status(self, user_id: uuid.UUID, is_deleted: bool) -> int:
        count = self.repository.set_deletion_status(user_id, is_deleted)
        logger.info(
            "Marked %d product(s) of user %s as %s",
            count,
            user_id,
            "deleted" if is_deleted else "active",
        )
        return count

    def search_products(self, criteria: ProductSearchCriteria, *, owner_id: uuid.UUID | None = None) -> list[Product]:
        return self.repository.search(criteria, owner_id=owner_id)
