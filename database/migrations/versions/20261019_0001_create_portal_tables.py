"""create lecture templates, invigilation, faculty directory and leave ledger

Revision ID: 20261019_0001
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

revision = "20261019_0001"
down_revision = None
branch_labels = None
depends_on = None


leave_type = sa.Enum("CL", "EL", "HPL", "OD", "CCL", "LOP", name="leave_type")


def upgrade() -> None:
    op.create_table(
        "lecture_templates",
        sa.Column("id", sa.String(length=36), primary_key=True, nullable=False),
        sa.Column("day", sa.String(length=20), nullable=False),
        sa.Column("time", sa.String(length=5), nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("faculty_id", sa.String(length=100), nullable=True),
        sa.Column("faculty_email", sa.String(length=255), nullable=False),
        sa.Column("subject", sa.String(length=200), nullable=False),
        sa.Column("room", sa.String(length=100), nullable=True),
        sa.Column("created_by", sa.String(length=255), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_lecture_templates_day", "lecture_templates", ["day"], unique=False)
    op.create_index("ix_lecture_templates_faculty_email", "lecture_templates", ["faculty_email"], unique=False)

    op.create_table(
        "invigilation",
        sa.Column("id", sa.String(length=36), primary_key=True, nullable=False),
        sa.Column("exam_name", sa.String(length=200), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("time", sa.String(length=5), nullable=False),
        sa.Column("venue", sa.String(length=100), nullable=False, server_default=""),
        sa.Column("faculty_email", sa.String(length=255), nullable=False),
        sa.Column("subject", sa.String(length=200), nullable=False),
        sa.Column("created_by", sa.String(length=255), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_invigilation_date", "invigilation", ["date"], unique=False)
    op.create_index("ix_invigilation_faculty_email", "invigilation", ["faculty_email"], unique=False)

    op.create_table(
        "faculty_leave_master",
        sa.Column("id", sa.String(length=36), primary_key=True, nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("faculty_email", sa.String(length=255), nullable=False),
        sa.Column("employee_id", sa.String(length=50), nullable=True),
        sa.Column("department", sa.String(length=200), nullable=True),
        sa.Column("cl", sa.Float(), nullable=False, server_default="0"),
        sa.Column("el", sa.Float(), nullable=False, server_default="0"),
        sa.Column("hpl", sa.Float(), nullable=False, server_default="0"),
        sa.Column("od", sa.Float(), nullable=False, server_default="0"),
        sa.Column("ccl", sa.Float(), nullable=False, server_default="0"),
        sa.Column("lop", sa.Float(), nullable=False, server_default="0"),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_faculty_leave_master_faculty_email", "faculty_leave_master", ["faculty_email"], unique=True)

    op.create_table(
        "leave_ledger",
        sa.Column("id", sa.String(length=36), primary_key=True, nullable=False),
        sa.Column("faculty_email", sa.String(length=255), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("leave_type", leave_type, nullable=False),
        sa.Column("days", sa.Float(), nullable=False, server_default="1"),
        sa.Column("session", sa.String(length=20), nullable=True),
        sa.Column("reason", sa.Text(), nullable=True),
        sa.Column("created_by", sa.String(length=255), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index("ix_leave_ledger_faculty_email", "leave_ledger", ["faculty_email"], unique=False)

    op.create_table(
        "activity_logs",
        sa.Column("id", sa.String(length=36), primary_key=True, nullable=False),
        sa.Column("actor_email", sa.String(length=255), nullable=True),
        sa.Column("action", sa.String(length=100), nullable=False),
        sa.Column("entity_type", sa.String(length=100), nullable=True),
        sa.Column("entity_id", sa.String(length=100), nullable=True),
        sa.Column("details", sa.JSON(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index("ix_activity_logs_actor_email", "activity_logs", ["actor_email"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_activity_logs_actor_email", table_name="activity_logs")
    op.drop_table("activity_logs")
    op.drop_index("ix_leave_ledger_faculty_email", table_name="leave_ledger")
    op.drop_table("leave_ledger")
    leave_type.drop(op.get_bind(), checkfirst=True)
    op.drop_index("ix_faculty_leave_master_faculty_email", table_name="faculty_leave_master")
    op.drop_table("faculty_leave_master")
    op.drop_index("ix_invigilation_faculty_email", table_name="invigilation")
    op.drop_index("ix_invigilation_date", table_name="invigilation")
    op.drop_table("invigilation")
    op.drop_index("ix_lecture_templates_faculty_email", table_name="lecture_templates")
    op.drop_index("ix_lecture_templates_day", table_name="lecture_templates")
    op.drop_table("lecture_templates")
