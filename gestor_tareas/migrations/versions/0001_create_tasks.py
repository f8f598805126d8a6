"""create tasks table"""
from __future__ import annotations

from alembic import op
import sqlalchemy as sa

revision = "0001_create_tasks"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    # Stores created before revisions were tracked already hold the table.
    if sa.inspect(op.get_bind()).has_table("tasks"):
        return
    op.create_table(
        "tasks",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("title", sa.Text()),
        sa.Column("done", sa.Integer()),
        sqlite_autoincrement=True,
    )


def downgrade() -> None:
    op.drop_table("tasks")
