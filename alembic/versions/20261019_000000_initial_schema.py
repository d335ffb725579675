"""
Initial schema: departments, students, teachers and courses.

Revision ID: 20261019_000000_initial_schema
Revises:
Create Date: 2026-10-19 00:00:00
"""

import sqlalchemy as sa

from alembic import op  # type: ignore[reportMissingImports]

# revision identifiers, used by Alembic.
revision = "20261019_000000_initial_schema"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    # departments
    op.create_table(
        "departments",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("id", name="departments_pkey"),
    )

    # students
    op.create_table(
        "students",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("full_name", sa.String(length=255), nullable=False),
        sa.Column("enrolled", sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column("dept_id", sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(
            ["dept_id"],
            ["departments.id"],
            ondelete="SET NULL",
            name="students_dept_id_fkey",
        ),
        sa.PrimaryKeyConstraint("id", name="students_pkey"),
        sa.UniqueConstraint("email", name="students_email_key"),
    )
    op.create_index("idx_students_dept", "students", ["dept_id"])
    op.create_index("idx_students_enrolled", "students", ["enrolled"])

    # teachers
    op.create_table(
        "teachers",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("full_name", sa.String(length=255), nullable=True),
        sa.PrimaryKeyConstraint("id", name="teachers_pkey"),
        sa.UniqueConstraint("email", name="teachers_email_key"),
    )

    # courses
    op.create_table(
        "courses",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("code", sa.String(length=50), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("teacher_id", sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(
            ["teacher_id"],
            ["teachers.id"],
            ondelete="SET NULL",
            name="courses_teacher_id_fkey",
        ),
        sa.PrimaryKeyConstraint("id", name="courses_pkey"),
    )
    op.create_index("idx_courses_teacher", "courses", ["teacher_id"])


def downgrade() -> None:
    op.drop_index("idx_courses_teacher", table_name="courses")
    op.drop_table("courses")
    op.drop_table("teachers")
    op.drop_index("idx_students_enrolled", table_name="students")
    op.drop_index("idx_students_dept", table_name="students")
    op.drop_table("students")
    op.drop_table("departments")
