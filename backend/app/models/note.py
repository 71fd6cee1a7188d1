"""
Noteful Backend — Note SQLAlchemy Model
=========================================

What:  ORM model representing the `notes` table.
Who:   Used by NoteService for CRUD operations and by Alembic for schema management.

Table Design:
    - id: integer primary key, assigned by the database
    - folder_id: required foreign key to folders.id; the database, not the
      request pipeline, rejects unknown folders
    - content: TEXT, may be the empty string but never NULL
    - modified: UTC timestamp set on insert, never client-settable
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, Index, Integer, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Note(Base):
    """
    A note filed under exactly one folder.

    Query Patterns:
        - List notes: SELECT ... ORDER BY id
        - Get single note: SELECT ... WHERE id = :id (primary key lookup)
        - Notes of a folder: uses idx_notes_folder_id
    """

    __tablename__ = "notes"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
        comment="Store-assigned identifier",
    )

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Title of the note",
    )

    folder_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("folders.id", ondelete="CASCADE"),
        nullable=False,
        comment="Folder this note is filed under",
    )

    content: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default="",
        comment="Body of the note",
    )

    modified: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
        comment="When this note was created (UTC)",
    )

    __table_args__ = (
        Index("idx_notes_folder_id", "folder_id"),
    )

    def __repr__(self) -> str:
        return (
            f"<Note(id={self.id}, folder_id={self.folder_id}, "
            f"modified='{self.modified}')>"
        )
