"""Product entity.

The catalog holds a single kind of entity. A product is identified by its
``product_code``; every other field may change over its lifetime.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

ORIGIN_COUNTRY_MAX_LENGTH = 50
PRODUCT_NAME_MAX_LENGTH = 50
PRODUCT_CODE_MAX_LENGTH = 10
DESCRIPTION_MAX_LENGTH = 255
PRICE_PRECISION = 18
PRICE_SCALE = 2


@dataclass
class Product:
    """A product in the catalog.

    Kept as a plain mutable dataclass: a product may be built with invalid
    values (e.g. from user input) and is only checked when it is handed to
    the manager, which calls :meth:`validate` before persisting.
    """

    origin_country: str
    product_name: str
    product_code: str
    price: Decimal
    quantity: int
    description: str | None = None

    def validate(self) -> list[str]:
        """Return the constraint violations of this product, empty if valid."""
        errors: list[str] = []
        _check_required_text(errors, "origin_country", self.origin_country, ORIGIN_COUNTRY_MAX_LENGTH)
        _check_required_text(errors, "product_name", self.product_name, PRODUCT_NAME_MAX_LENGTH)
        _check_required_text(errors, "product_code", self.product_code, PRODUCT_CODE_MAX_LENGTH)

        if not isinstance(self.price, Decimal):
            errors.append(f"price must be a Decimal, got {type(self.price).__name__}")
        elif not self.price.is_finite() or self.price <= 0:
            errors.append("price must be greater than zero")
        elif self.price.normalize().as_tuple().exponent < -PRICE_SCALE:
            errors.append(f"price must have at most {PRICE_SCALE} decimal places")
        elif self.price.adjusted() >= PRICE_PRECISION - PRICE_SCALE:
            errors.append(f"price must have at most {PRICE_PRECISION - PRICE_SCALE} digits before the decimal point")

        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            errors.append(f"quantity must be an integer, got {type(self.quantity).__name__}")
        elif self.quantity < 0:
            errors.append("quantity cannot be negative")

        if self.description is not None and len(self.description) > DESCRIPTION_MAX_LENGTH:
            errors.append(f"description must be at most {DESCRIPTION_MAX_LENGTH} characters")
        return errors


def _check_required_text(errors: list[str], field: str, value: object, max_length: int) -> None:
    if not isinstance(value, str) or not value.strip():
        errors.append(f"{field} is required")
    elif len(value) > max_length:
        errors.append(f"{field} must be at most {max_length} characters")
