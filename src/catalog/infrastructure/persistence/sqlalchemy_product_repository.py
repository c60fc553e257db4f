"""SQLAlchemy-backed implementation of ProductRepository."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository
from catalog.infrastructure.persistence.orm import ProductRecord

logger = logging.getLogger(__name__)


class SqlAlchemyProductRepository(ProductRepository):

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    # --- ProductRepository interface ------------------------------------------

    async def add(self, product: Product) -> None:
        async with self._session_factory() as session, session.begin():
            session.add(self._to_record(product))
        logger.debug("Inserted product row %s", product.product_code)

    async def delete(self, product_code: str) -> bool:
        async with self._session_factory() as session, session.begin():
            result = await session.execute(
                delete(ProductRecord).where(ProductRecord.product_code == product_code)
            )
        logger.debug("Deleted %d product row(s) for %s", result.rowcount, product_code)
        return result.rowcount > 0

    async def update(self, product: Product) -> bool:
        async with self._session_factory() as session, session.begin():
            record = await session.scalar(
                select(ProductRecord).where(ProductRecord.product_code == product.product_code)
            )
            if record is None:
                return False
            record.origin_country = product.origin_country
            record.product_name = product.product_name
            record.price = product.price
            record.quantity = product.quantity
            record.description = product.description
        logger.debug("Updated product row %s", product.product_code)
        return True

    async def get_all(self) -> list[Product]:
        async with self._session_factory() as session:
            records = await session.scalars(select(ProductRecord).order_by(ProductRecord.id))
            return [self._to_domain(r) for r in records]

    async def get_by_filter(self, **criteria: Any) -> list[Product]:
        async with self._session_factory() as session:
            records = await session.scalars(
                select(ProductRecord).filter_by(**criteria).order_by(ProductRecord.id)
            )
            return [self._to_domain(r) for r in records]

    async def get_by_code(self, product_code: str) -> Product | None:
        async with self._session_factory() as session:
            record = await session.scalar(
                select(ProductRecord).where(ProductRecord.product_code == product_code)
            )
            return self._to_domain(record) if record is not None else None

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_record(product: Product) -> ProductRecord:
        return ProductRecord(
            origin_country=product.origin_country,
            product_name=product.product_name,
            product_code=product.product_code,
            price=product.price,
            quantity=product.quantity,
            description=product.description,
        )

    @staticmethod
    def _to_domain(record: ProductRecord) -> Product:
        return Product(
            origin_country=record.origin_country,
            product_name=record.product_name,
            product_code=record.product_code,
            price=record.price,
            quantity=record.quantity,
            description=record.description,
        )
