"""
Shared fixtures: a fresh SQLite store per test (in-memory by default, a temporary
file when a test needs several independent connections), and an HTTP client
driving the ASGI app in-process against that store.
"""
import os
import tempfile
import unittest
from datetime import datetime, timedelta, timezone

import httpx
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

import models  # noqa: F401  (registers tables)
from database import build_engine, get_db, init_db
from main import app

T0 = datetime(2026, 1, 15, 9, 30, tzinfo=timezone.utc)


def clock(*offsets_seconds: int):
    """Timestamps T0 + offset, one per call, for patching utcnow."""
    return [T0 + timedelta(seconds=s) for s in offsets_seconds]


class StoreTestCase(unittest.IsolatedAsyncioTestCase):
    create_tables = True

    def database_url(self) -> str:
        return "sqlite+aiosqlite:///:memory:"

    async def asyncSetUp(self):
        self.engine = build_engine(self.database_url())
        if self.create_tables:
            await init_db(self.engine)
        self.sessionmaker = async_sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
        )

    async def asyncTearDown(self):
        await self.engine.dispose()


class FileStoreTestCase(StoreTestCase):
    """Same store on a temporary file, so each session checks out its own connection."""

    def database_url(self) -> str:
        self._tmpdir = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmpdir.cleanup)
        return f"sqlite+aiosqlite:///{os.path.join(self._tmpdir.name, 'loanlink.db')}"


class ApiTestCase(StoreTestCase):
    async def asyncSetUp(self):
        await super().asyncSetUp()

        async def _get_db():
            async with self.sessionmaker() as session:
                try:
                    yield session
                    await session.commit()
                except Exception:
                    await session.rollback()
                    raise

        app.dependency_overrides[get_db] = _get_db
        self.client = httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test")

    async def asyncTearDown(self):
        await self.client.aclose()
        app.dependency_overrides.clear()
        await super().asyncTearDown()
