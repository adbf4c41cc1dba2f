import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from shiftdesk.core.exceptions import StorageError


logger = logging.getLogger(__name__)


class BaseStore:
    """Opens one session per operation and releases it when the operation ends."""

    name = "store"

    def __init__(self, session_maker: async_sessionmaker[AsyncSession]):
        self._session_maker = session_maker

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        try:
            async with self._session_maker() as session:
                yield session
        except SQLAlchemyError as e:
            logger.error(f"{self.name} database error: {e}")
            raise StorageError(message=f"{self.name} storage failure") from e
