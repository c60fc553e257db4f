"""In-memory fake repository for testing.

Implements the same abstract interface as the SQLAlchemy repository
but keeps everything in a dict. No database, no side effects.
"""

from __future__ import annotations

import dataclasses
from typing import Any

from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository


class FakeProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[str, Product] = {}
        self.calls: list[str] = []
        for p in products or []:
            self._store[p.product_code] = dataclasses.replace(p)

    async def add(self, product: Product) -> None:
        self.calls.append("add")
        self._store[product.product_code] = dataclasses.replace(product)

    async def delete(self, product_code: str) -> bool:
        self.calls.append("delete")
        return self._store.pop(product_code, None) is not None

    async def update(self, product: Product) -> bool:
        self.calls.append("update")
        if product.product_code not in self._store:
            return False
        self._store[product.product_code] = dataclasses.replace(product)
        return True

    async def get_all(self) -> list[Product]:
        self.calls.append("get_all")
        return [dataclasses.replace(p) for p in self._store.values()]

    async def get_by_filter(self, **criteria: Any) -> list[Product]:
        self.calls.append("get_by_filter")
        return [
            dataclasses.replace(p)
            for p in self._store.values()
            if all(getattr(p, field) == value for field, value in criteria.items())
        ]

    async def get_by_code(self, product_code: str) -> Product | None:
        self.calls.append("get_by_code")
        p = self._store.get(product_code)
        return dataclasses.replace(p) if p is not None else None
