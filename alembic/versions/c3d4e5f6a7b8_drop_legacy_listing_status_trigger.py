"""drop legacy listing status trigger

The listing-status mirror now runs as an ORM flush hook
(``brokerage.models.listeners``).  Databases created from the old SQL
script still carry the PL/pgSQL trigger; drop it so the rule is applied
exactly once.

Revision ID: c3d4e5f6a7b8
Revises: b2c3d4e5f6a7
Create Date: 2026-10-06 11:00:00.000000

"""

from typing import Sequence, Union

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "c3d4e5f6a7b8"
down_revision: Union[str, None] = "b2c3d4e5f6a7"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.execute(
        "DROP TRIGGER IF EXISTS trigger_after_transaction_update ON transactions"
    )
    op.execute("DROP FUNCTION IF EXISTS update_property_listing_status()")


def downgrade() -> None:
    # Only some databases ever had the trigger; not recreated
    pass
