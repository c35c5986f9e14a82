# auction_server/database.py
import logging
from typing import AsyncIterator, Optional

from fastapi import Request
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.orm import declarative_base, sessionmaker

logger = logging.getLogger(__name__)

Base = declarative_base()


class ParticipantStore:
    """
    Owns the connection to the record store.

    The engine is created by ``connect()`` when the application starts and
    disposed by ``close()`` on shutdown. Request handlers never reach for a
    module level engine; they get sessions from the store attached to the app.
    """

    def __init__(self, database_url: str, echo: bool = False):
        self.database_url = database_url
        self.echo = echo
        self.engine: Optional[AsyncEngine] = None
        self.session_factory: Optional[sessionmaker] = None

    async def connect(self) -> None:
        # The table has to be registered on Base.metadata before create_all.
        from . import models  # noqa: F401

        self.engine = create_async_engine(self.database_url, echo=self.echo)
        self.session_factory = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
        try:
            async with self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        except SQLAlchemyError:
            # Not fatal: requests touching the store will report the failure.
            logger.exception("Could not connect to the record store at startup")
            return
        logger.info("Connected to the record store")

    async def close(self) -> None:
        if self.engine is not None:
            await self.engine.dispose()
            logger.info("Record store connection closed")
        self.engine = None
        self.session_factory = None

    def session(self) -> AsyncSession:
        if self.session_factory is None:
            raise RuntimeError("ParticipantStore.connect() has not been called")
        return self.session_factory()


def get_store(request: Request) -> ParticipantStore:
    return request.app.state.store


async def get_db_session(request: Request) -> AsyncIterator[AsyncSession]:
    # Writes are committed by the crud functions, so a failed commit is still
    # seen by the endpoint that issued it.
    store = get_store(request)
    async with store.session() as session:
        yield session
