"""SQLAlchemy unit of work over one async session."""

from sqlalchemy.ext.asyncio import AsyncSession

from application.interfaces import IUnitOfWork
from infrastructure.database.repositories import (
    SQLAlchemyApplicationRepository,
    SQLAlchemyDocumentRepository,
    SQLAlchemyHistoryRepository,
)


class SQLAlchemyUnitOfWork(IUnitOfWork):
    """
    Concrete unit of work sharing one AsyncSession between repositories.
    
    All flushes made inside one ``async with`` block belong to the same
    database transaction, committed or rolled back on exit.
    """
    
    def __init__(self, session: AsyncSession):
        """Initialize unit of work with database session."""
        self.session = session
        self.applications = SQLAlchemyApplicationRepository(session)
        self.history = SQLAlchemyHistoryRepository(session)
        self.documents = SQLAlchemyDocumentRepository(session)
    
    async def commit(self) -> None:
        await self.session.commit()
    
    async def rollback(self) -> None:
        await self.session.rollback()
