"""Fixtures that run the catalog against a real SQLite database.

Every test gets its own database file; the schema is created before the
test and dropped afterwards.
"""

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from catalog.application.products_manager import ProductsManager
from catalog.infrastructure.persistence.database import (
    create_engine,
    create_schema,
    create_session_factory,
    drop_schema,
)
from catalog.infrastructure.persistence.sqlalchemy_product_repository import (
    SqlAlchemyProductRepository,
)


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = create_engine(f"sqlite+aiosqlite:///{tmp_path / 'catalog.db'}")
    await create_schema(engine)
    yield engine
    await drop_schema(engine)
    await engine.dispose()


@pytest.fixture
def session_factory(engine) -> async_sessionmaker[AsyncSession]:
    return create_session_factory(engine)


@pytest.fixture
def repository(session_factory) -> SqlAlchemyProductRepository:
    return SqlAlchemyProductRepository(session_factory)


@pytest.fixture
def manager(repository) -> ProductsManager:
    return ProductsManager(repository)
