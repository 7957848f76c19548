"""Application and application history SQLAlchemy models."""

from datetime import datetime
from typing import Optional

from sqlalchemy import String, Integer, DateTime, Text, ForeignKey, JSON
from sqlalchemy.orm import Mapped, mapped_column

from domain.clock import utc_now
from infrastructure.database.session import Base


class ApplicationModel(Base):
    """SQLAlchemy model for applications."""
    
    __tablename__ = "applications"
    
    # Primary key
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    
    # Owner, supplied by the identity provider
    user_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    
    status: Mapped[str] = mapped_column(
        String(20),
        default="draft",
        nullable=False,
        index=True
    )
    form_data: Mapped[dict] = mapped_column(JSON, default=dict, nullable=False)
    
    # Timestamps
    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=utc_now,
        nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=utc_now,
        nullable=False
    )
    
    def __repr__(self) -> str:
        return f"<ApplicationModel(id={self.id}, user_id={self.user_id}, status={self.status})>"


class ApplicationHistoryModel(Base):
    """SQLAlchemy model for the append-only application history."""
    
    __tablename__ = "application_history"
    
    # Primary key
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    
    # Foreign key to application
    application_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("applications.id"),
        nullable=False,
        index=True
    )
    
    # Entry data; status is NULL for note-only entries
    status: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    created_by: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=utc_now,
        nullable=False,
        index=True
    )
    
    def __repr__(self) -> str:
        return f"<ApplicationHistoryModel(id={self.id}, status={self.status})>"
