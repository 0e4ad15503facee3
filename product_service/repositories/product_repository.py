"""Data access for products backed by SQLAlchemy."""
from __future__ import annotations

import uuid
from typing import Optional

from sqlalchemy import delete, select, update

from product_service.db.models import Product
from product_service.db.session import get_session
from product_service.domain.search import ProductSearchCriteria


class ProductRepository:
    """CRUD helpers wrapping the SQLAlchemy session."""

    def list_by_owner(self, user_id: uuid.UUID) -> list[Product]:
        with get_session() as session:
            stmt = select(Product).where(
                Product.created_by_user_id == user_id,
                Product.is_deleted.is_(False),
            )
            return list(session.execute(stmt.order_by(Product.created_at)).scalars().all())

    def get(self, product_id: uuid.UUID) -> Optional[Product]:
        with get_session() as session:
            return session.get(Product, product_id)

    def add(self, product: Product) -> Product:
        with get_session() as session:
            session.add(product)
            session.commit()
            session.refresh(product)
            return product

    def update(self, product: Product) -> Product:
        with get_session() as session:
            merged = session.merge(product)
            session.commit()
            session.refresh(merged)
            return merged

    def delete(self, product_id: uuid.UUID) -> bool:
        with get_session() as session:
            result = session.execute(delete(Product).where(Product.id == product_id))
            session.commit()
            return bool(result.rowcount)

    def set_deletion_status(self, user_id: uuid.UUID, is_deleted: bool) -> int:
        """Flag every product of ``user_id``; returns the number of rows touched."""
        with get_session() as session:
            stmt = (
                update(Product)
                .where(Product.created_by_user_id == user_id)
                .values(is_deleted=is_deleted)
            )
            result = session.execute(stmt)
            session.commit()
            return int(result.rowcount or 0)

    def search(self, criteria: ProductSearchCriteria, *, owner_id: uuid.UUID | None = None) -> list[Product]:
        stmt = select(Product).where(Product.is_deleted.is_(False))
        if owner_id is not None:
            stmt = stmt.where(Product.created_by_user_id == owner_id)
        name = (criteria.name or "").strip()
        if name:
            stmt = stmt.where(Product.name.contains(name, autoescape=True))
        if criteria.min_price is not None:
            stmt = stmt.where(Product.price >= criteria.min_price)
        if criteria.max_price is not None:
            stmt = stmt.where(Product.price <= criteria.max_price)
        if criteria.is_available is not None:
            stmt = stmt.where(Product.is_available == criteria.is_available)
        with get_session() as session:
            return list(session.execute(stmt.order_by(Product.created_at)).scalars().all())
