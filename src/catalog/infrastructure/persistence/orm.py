"""SQLAlchemy mapping for the products table.

ORM records stay inside the persistence package; repositories convert them
to and from domain :class:`~catalog.domain.model.product.Product` objects.
"""

from __future__ import annotations

from decimal import Decimal

from sqlalchemy import CheckConstraint, Integer, Numeric, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from catalog.domain.model.product import (
    DESCRIPTION_MAX_LENGTH,
    ORIGIN_COUNTRY_MAX_LENGTH,
    PRODUCT_CODE_MAX_LENGTH,
    PRICE_PRECISION,
    PRICE_SCALE,
    PRODUCT_NAME_MAX_LENGTH,
)


class Base(DeclarativeBase):
    pass


class ProductRecord(Base):
    __tablename__ = "products"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    origin_country: Mapped[str] = mapped_column(String(ORIGIN_COUNTRY_MAX_LENGTH), nullable=False)
    product_name: Mapped[str] = mapped_column(String(PRODUCT_NAME_MAX_LENGTH), nullable=False)
    product_code: Mapped[str] = mapped_column(
        String(PRODUCT_CODE_MAX_LENGTH), nullable=False, unique=True, index=True
    )
    price: Mapped[Decimal] = mapped_column(Numeric(PRICE_PRECISION, PRICE_SCALE), nullable=False)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    description: Mapped[str | None] = mapped_column(String(DESCRIPTION_MAX_LENGTH), nullable=True)

    __table_args__ = (
        CheckConstraint("price > 0", name="check_price_positive"),
        CheckConstraint("quantity >= 0", name="check_quantity_non_negative"),
    )

    def __repr__(self) -> str:
        return f"<ProductRecord(code='{self.product_code}', name='{self.product_name}')>"
