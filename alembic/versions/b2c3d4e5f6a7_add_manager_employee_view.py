"""add manager_employee_view

Revision ID: b2c3d4e5f6a7
Revises: a1b2c3d4e5f6
Create Date: 2026-10-05 09:30:00.000000

"""

from typing import Sequence, Union

from alembic import op

from brokerage.models.views import (
    DROP_MANAGER_EMPLOYEE_VIEW_SQL,
    MANAGER_EMPLOYEE_VIEW_SQL,
)

# revision identifiers, used by Alembic.
revision: str = "b2c3d4e5f6a7"
down_revision: Union[str, None] = "a1b2c3d4e5f6"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.execute(MANAGER_EMPLOYEE_VIEW_SQL)


def downgrade() -> None:
    op.execute(DROP_MANAGER_EMPLOYEE_VIEW_SQL)
