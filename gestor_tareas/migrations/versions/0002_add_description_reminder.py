"""add description and reminder fields"""
from __future__ import annotations

from alembic import op
import sqlalchemy as sa

revision = "0002_add_description_reminder"
down_revision = "0001_create_tasks"
branch_labels = None
depends_on = None

NEW_COLUMNS = ("description", "reminder")


def _existing_columns() -> set[str]:
    return {column["name"] for column in sa.inspect(op.get_bind()).get_columns("tasks")}


def upgrade() -> None:
    # Re-applying to a table that already has the columns is a no-op.
    existing = _existing_columns()
    for name in NEW_COLUMNS:
        if name not in existing:
            op.add_column("tasks", sa.Column(name, sa.Text(), nullable=True))


def downgrade() -> None:
    with op.batch_alter_table("tasks") as batch:
        batch.drop_column("reminder")
        batch.drop_column("description")
