"""Abstract repository for the Product entity.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (SQLAlchemy, in-memory)
live in the infrastructure layer and in the test fakes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from catalog.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    async def add(self, product: Product) -> None:
        """Persist a new product."""

    @abstractmethod
    async def delete(self, product_code: str) -> bool:
        """Remove the product with this code. Return False if there was none."""

    @abstractmethod
    async def update(self, product: Product) -> bool:
        """Overwrite the stored product with the same code.

        Return False if no stored product has that code.
        """

    @abstractmethod
    async def get_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    async def get_by_filter(self, **criteria: Any) -> list[Product]:
        """Return the products whose attributes equal every given criterion."""

    @abstractmethod
    async def get_by_code(self, product_code: str) -> Product | None:
        """Return a product by its code, or None if not found."""
