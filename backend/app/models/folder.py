"""
Noteful Backend — Folder SQLAlchemy Model
===========================================

What:  ORM model representing the `folders` table.
Who:   Used by FolderService for CRUD operations and by Alembic.

A folder has a store-assigned integer id and a name. The name is the only
field clients may change after creation. Deleting a folder deletes the notes
filed under it (ON DELETE CASCADE on notes.folder_id).
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Folder(Base):
    """A named container for notes."""

    __tablename__ = "folders"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
        comment="Store-assigned identifier",
    )

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Display name of the folder",
    )

    def __repr__(self) -> str:
        return f"<Folder(id={self.id}, name='{self.name}')>"
