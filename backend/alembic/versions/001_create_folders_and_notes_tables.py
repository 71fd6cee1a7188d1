"""Create folders and notes tables

Revision ID: 001
Revises: None
Create Date: 2024-01-15 00:00:00.000000+00:00

What:  Creates the `folders` table and the `notes` table that references it.
How:   notes.folder_id is a foreign key with ON DELETE CASCADE, so deleting a
       folder removes its notes inside the database.

Rollback: downgrade() drops both tables (destructive, all data lost).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "folders",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False,
                  comment="Store-assigned identifier"),
        sa.Column("name", sa.String(255), nullable=False,
                  comment="Display name of the folder"),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "notes",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False,
                  comment="Store-assigned identifier"),
        sa.Column("name", sa.String(255), nullable=False,
                  comment="Title of the note"),
        sa.Column("folder_id", sa.Integer(), nullable=False,
                  comment="Folder this note is filed under"),
        sa.Column("content", sa.Text(), nullable=False,
                  comment="Body of the note"),
        sa.Column(
            "modified",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
            comment="When this note was created (UTC)",
        ),
        sa.ForeignKeyConstraint(["folder_id"], ["folders.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_index("idx_notes_folder_id", "notes", ["folder_id"])


def downgrade() -> None:
    op.drop_index("idx_notes_folder_id", table_name="notes")
    op.drop_table("notes")
    op.drop_table("folders")
