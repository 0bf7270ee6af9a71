# ABOUTME: Database manager for the optional SQLite copy of the corpus
# ABOUTME: Replaces the stored corpus in a single transaction so readers never see a partial import

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import delete, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from qa_corpus.core.models import QuestionRecord
from qa_corpus.persistence.models import QuestionRow, utcnow
from qa_corpus.persistence.writers import CorpusWriteError
from qa_corpus.utils.logging import get_logger


class DatabaseManager:
    """Manages async database operations for corpus persistence."""

    def __init__(self, database_url: str = "sqlite+aiosqlite:///./questions.db"):
        """Initialize the database manager.

        Args:
            database_url: SQLAlchemy async database URL (e.g. sqlite+aiosqlite:///./db.db)
        """
        self.database_url = database_url
        self.engine = create_async_engine(database_url, echo=False)
        self.async_session = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,  # Allow access to attributes after commit
        )
        self.logger = get_logger(__name__)

    async def create_tables(self) -> None:
        """Create all database tables if they don't exist."""
        try:
            async with self.engine.begin() as conn:
                await conn.run_sync(SQLModel.metadata.create_all)
        except (SQLAlchemyError, OSError) as e:
            raise CorpusWriteError(f"Cannot prepare database {self.database_url}: {e}") from e

    async def replace_corpus(self, records: Sequence[QuestionRecord]) -> int:
        """Replace every stored question with ``records`` in one transaction.

        Returns:
            Number of rows written
        """
        imported_at = utcnow()
        rows = [QuestionRow.from_record(record, position, imported_at) for position, record in enumerate(records)]

        try:
            async with self.async_session() as session:
                async with session.begin():
                    await session.exec(delete(QuestionRow))  # type: ignore[call-overload]
                    session.add_all(rows)
        except SQLAlchemyError as e:
            raise CorpusWriteError(f"Failed to store corpus in {self.database_url}: {e}") from e

        self.logger.info("Stored corpus in database", records=len(rows), database_url=self.database_url)
        return len(rows)

    async def list_questions(self) -> list[QuestionRecord]:
        """Return the stored corpus in its original order."""
        async with self.async_session() as session:
            result = await session.exec(select(QuestionRow).order_by(QuestionRow.position))  # type: ignore[call-overload]
            return [row.to_record() for row in result.scalars().all()]

    async def count_questions(self) -> int:
        async with self.async_session() as session:
            result = await session.exec(select(func.count()).select_from(QuestionRow))  # type: ignore[call-overload]
            return int(result.scalar_one())

    async def close(self) -> None:
        """Dispose of the engine and its connections."""
        await self.engine.dispose()
