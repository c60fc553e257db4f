"""Application service: the products manager.

Every catalog use case goes through :class:`ProductsManager`. It enforces
the product constraints before anything is written and turns empty query
results into :class:`EntityNotFoundError`. Persistence itself is delegated
to a :class:`ProductRepository`.
"""

from __future__ import annotations

import logging

from catalog.domain.exceptions import (
    EntityNotFoundError,
    InvalidArgumentError,
    ValidationError,
)
from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)

# Message texts are part of the public contract and are matched verbatim
# by callers, including the misspelling in the update message.
INVALID_PRODUCT_ON_ADD = "Invalid product!"
INVALID_PRODUCT_ON_UPDATE = "Invalid prduct!"
EMPTY_PRODUCT_CODE = "Product code cannot be empty."
NO_PRODUCTS = "No product found."
NO_PRODUCTS_FOR_COUNTRY = "No product found with the given first name."


def _not_found_by_code(product_code: str) -> str:
    return f"No product found with product code: {product_code}"


class ProductsManager:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    async def add(self, product: Product) -> None:
        """Validate a new product and add it to the catalog."""
        errors = product.validate()
        if errors:
            logger.warning("Rejected new product %r: %s", product.product_code, "; ".join(errors))
            raise ValidationError(INVALID_PRODUCT_ON_ADD, errors)

        existing = await self._product_repo.get_by_code(product.product_code)
        if existing is not None:
            logger.warning("Rejected new product %r: code already in use", product.product_code)
            raise ValidationError(
                f"Product code '{product.product_code}' is already in use.",
                ["product_code must be unique"],
            )

        await self._product_repo.add(product)
        logger.info("Added product %s", product.product_code)

    async def delete(self, product_code: str | None) -> None:
        """Remove the product with the given code."""
        if product_code is None or not product_code.strip():
            logger.warning("Rejected delete with empty product code %r", product_code)
            raise InvalidArgumentError(EMPTY_PRODUCT_CODE)

        removed = await self._product_repo.delete(product_code)
        if not removed:
            logger.warning("Rejected delete of unknown product %r", product_code)
            raise EntityNotFoundError(_not_found_by_code(product_code))
        logger.info("Deleted product %s", product_code)

    async def update(self, product: Product) -> None:
        """Validate a product and overwrite the stored one with the same code."""
        errors = product.validate()
        if errors:
            logger.warning("Rejected update of product %r: %s", product.product_code, "; ".join(errors))
            raise ValidationError(INVALID_PRODUCT_ON_UPDATE, errors)

        updated = await self._product_repo.update(product)
        if not updated:
            logger.warning("Rejected update of unknown product %r", product.product_code)
            raise EntityNotFoundError(_not_found_by_code(product.product_code))
        logger.info("Updated product %s", product.product_code)

    async def get_all(self) -> list[Product]:
        products = await self._product_repo.get_all()
        if not products:
            raise EntityNotFoundError(NO_PRODUCTS)
        return products

    async def search_by_origin_country(self, country: str) -> list[Product]:
        """Return every product whose origin country is exactly ``country``."""
        products = await self._product_repo.get_by_filter(origin_country=country)
        if not products:
            raise EntityNotFoundError(NO_PRODUCTS_FOR_COUNTRY)
        return products

    async def get_specific(self, product_code: str) -> Product:
        product = await self._product_repo.get_by_code(product_code)
        if product is None:
            raise EntityNotFoundError(_not_found_by_code(product_code))
        return product
