"""Create emp table.

Revision ID: 002
Revises: 001
Create Date: 2024-12-23 08:50:12.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "002"
down_revision: Union[str, None] = "001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the emp table and its department foreign key."""
    op.create_table(
        "emp",
        sa.Column("empno", sa.Integer, autoincrement=True),
        sa.Column("ename", sa.String(10), nullable=False),
        sa.Column("job", sa.String(9), nullable=False),
        # Checked by the application, not constrained here
        sa.Column("mgr", sa.Integer, nullable=True),
        sa.Column("hiredate", sa.Date, nullable=False),
        sa.Column("sal", sa.Numeric(7, 2), nullable=False),
        sa.Column("comm", sa.Numeric(7, 2), nullable=True),
        sa.Column("deptno", sa.Integer, nullable=False),
        sa.PrimaryKeyConstraint("empno", name="pk_emp"),
        sa.ForeignKeyConstraint(
            ["deptno"],
            ["dept.deptno"],
            name="fk_deptno",
            ondelete="RESTRICT",
            onupdate="RESTRICT",
        ),
    )

    op.create_index("ix_emp_deptno", "emp", ["deptno"])
    op.create_index("ix_emp_mgr", "emp", ["mgr"])


def downgrade() -> None:
    """Drop the emp table."""
    op.drop_index("ix_emp_mgr", table_name="emp")
    op.drop_index("ix_emp_deptno", table_name="emp")
    op.drop_table("emp")
