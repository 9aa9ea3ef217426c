from __future__ import annotations

from collections.abc import AsyncIterator

import pytest
import pytest_asyncio

from shopstock.infrastructure.persistence.database import Database


@pytest.fixture
def database_url(tmp_path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'shopstock.db'}"


@pytest_asyncio.fixture
async def database(database_url) -> AsyncIterator[Database]:
    db = Database(database_url)
    await db.create_tables()
    try:
        yield db
    finally:
        await db.close()
