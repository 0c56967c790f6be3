"""
Durable key-value storage.

SessionStore only needs three operations on string values under a string
key. Backends raise StorageError on failure; callers decide whether that
failure is fatal.
"""

from typing import Protocol

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from mtgconverter.models.db import StoredValueDB
from mtgconverter.models.errors import StorageError


class KeyValueStorage(Protocol):
    """Async string store scoped to one user profile."""

    async def get(self, key: str) -> str | None: ...

    async def set(self, key: str, value: str) -> None: ...

    async def remove(self, key: str) -> None: ...


class MemoryStorage:
    """In-process storage. Contents are lost when the process exits."""

    def __init__(self) -> None:
        self._values: dict[str, str] = {}

    async def get(self, key: str) -> str | None:
        return self._values.get(key)

    async def set(self, key: str, value: str) -> None:
        self._values[key] = value

    async def remove(self, key: str) -> None:
        self._values.pop(key, None)


class DatabaseStorage:
    """Storage backed by the `session_storage` table."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def get(self, key: str) -> str | None:
        try:
            async with self._session_factory() as session:
                result = await session.execute(
                    select(StoredValueDB.value).where(StoredValueDB.key == key)
                )
                return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise StorageError("read", str(e)) from e

    async def set(self, key: str, value: str) -> None:
        try:
            async with self._session_factory() as session:
                stored = await session.get(StoredValueDB, key)
                if stored is None:
                    session.add(StoredValueDB(key=key, value=value))
                else:
                    stored.value = value
                await session.commit()
        except SQLAlchemyError as e:
            raise StorageError("write", str(e)) from e

    async def remove(self, key: str) -> None:
        try:
            async with self._session_factory() as session:
                await session.execute(delete(StoredValueDB).where(StoredValueDB.key == key))
                await session.commit()
        except SQLAlchemyError as e:
            raise StorageError("remove", str(e)) from e
