"""Create dept table.

Revision ID: 001
Create Date: 2024-12-23 08:50:07.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the dept table."""
    op.create_table(
        "dept",
        sa.Column("deptno", sa.Integer, autoincrement=True),
        sa.Column("dname", sa.String(14), nullable=False),
        sa.Column("loc", sa.String(13), nullable=False),
        sa.PrimaryKeyConstraint("deptno", name="pk_dept"),
    )


def downgrade() -> None:
    """Drop the dept table."""
    op.drop_table("dept")
