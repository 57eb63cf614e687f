"""create issue, community note and upvote tables

Revision ID: 0001_a3f1c9d2e7b4
Revises:
Create Date: 2026-10-19 09:12:44.318210

"""
from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "0001_a3f1c9d2e7b4"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

ISSUE_CATEGORIES = (
    "CORRUPTION",
    "POTHOLE",
    "WATER",
    "ELECTRICITY",
    "DOMESTIC_VIOLENCE",
    "CRIME",
    "SANITATION",
    "EDUCATION",
    "HEALTHCARE",
    "ENVIRONMENT",
    "OTHER",
)
ISSUE_STATUSES = ("REPORTED", "IN_PROGRESS", "RESOLVED")
NOTE_RATINGS = ("HELPFUL", "PARTIALLY_HELPFUL", "NOT_HELPFUL")


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.TIMESTAMP(timezone=True), server_default=sa.text("CURRENT_TIMESTAMP"), nullable=False),
        sa.Column("updated_at", sa.TIMESTAMP(timezone=True), server_default=sa.text("CURRENT_TIMESTAMP"), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        "issues",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("title", sa.String(length=100), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("category", sa.Enum(*ISSUE_CATEGORIES, name="issue_category"), nullable=False),
        sa.Column("status", sa.Enum(*ISSUE_STATUSES, name="issue_status"), nullable=False),
        sa.Column("latitude", sa.Float(), nullable=False),
        sa.Column("longitude", sa.Float(), nullable=False),
        sa.Column("state", sa.String(length=100), nullable=False),
        sa.Column("city", sa.String(length=100), nullable=False),
        sa.Column("area", sa.String(length=200), nullable=True),
        sa.Column("pincode", sa.String(length=20), nullable=True),
        sa.Column("image_urls", sa.JSON(), nullable=False),
        sa.Column("created_by", sa.String(length=255), nullable=False),
        sa.Column("upvotes", sa.Integer(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_issues")),
    )
    with op.batch_alter_table("issues", schema=None) as batch_op:
        for column in ("id", "category", "status", "latitude", "longitude", "state", "city", "upvotes", "created_at"):
            batch_op.create_index(batch_op.f(f"ix_issues_{column}"), [column], unique=False)

    op.create_table(
        "community_notes",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("issue_id", sa.Uuid(), nullable=False),
        sa.Column("created_by", sa.String(length=255), nullable=False),
        sa.Column("rating", sa.Enum(*NOTE_RATINGS, name="note_rating"), nullable=True),
        sa.Column("helpful", sa.Integer(), nullable=False),
        sa.Column("not_helpful", sa.Integer(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(
            ["issue_id"],
            ["issues.id"],
            name=op.f("fk_community_notes_issue_id_issues"),
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_community_notes")),
    )
    with op.batch_alter_table("community_notes", schema=None) as batch_op:
        for column in ("id", "issue_id", "created_at"):
            batch_op.create_index(batch_op.f(f"ix_community_notes_{column}"), [column], unique=False)

    op.create_table(
        "issue_upvotes",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("issue_id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.String(length=255), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(
            ["issue_id"],
            ["issues.id"],
            name=op.f("fk_issue_upvotes_issue_id_issues"),
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_issue_upvotes")),
        sa.UniqueConstraint("issue_id", "user_id", name="unique_issue_user_upvote"),
    )
    with op.batch_alter_table("issue_upvotes", schema=None) as batch_op:
        for column in ("id", "issue_id", "created_at"):
            batch_op.create_index(batch_op.f(f"ix_issue_upvotes_{column}"), [column], unique=False)


def downgrade() -> None:
    op.drop_table("issue_upvotes")
    op.drop_table("community_notes")
    op.drop_table("issues")

    bind = op.get_bind()
    if bind.dialect.name == "postgresql":
        for enum_name in ("note_rating", "issue_status", "issue_category"):
            op.execute(f"DROP TYPE IF EXISTS {enum_name}")
