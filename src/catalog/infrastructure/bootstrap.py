"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine

from catalog.application.products_manager import ProductsManager
from catalog.infrastructure.persistence.database import (
    create_engine,
    create_session_factory,
)
from catalog.infrastructure.persistence.sqlalchemy_product_repository import (
    SqlAlchemyProductRepository,
)
from catalog.infrastructure.settings import Settings


@dataclass
class Container:
    engine: AsyncEngine
    products_manager: ProductsManager

    async def dispose(self) -> None:
        await self.engine.dispose()


def build(settings: Settings) -> Container:
    _ensure_sqlite_directory(settings.database_url)
    engine = create_engine(settings.database_url, echo=settings.sql_echo)
    repo = SqlAlchemyProductRepository(create_session_factory(engine))
    return Container(engine=engine, products_manager=ProductsManager(repo))


def _ensure_sqlite_directory(database_url: str) -> None:
    url = make_url(database_url)
    if url.get_backend_name() == "sqlite" and url.database and url.database != ":memory:":
        Path(url.database).parent.mkdir(parents=True, exist_ok=True)
