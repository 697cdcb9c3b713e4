"""Read-only views layered on the brokerage tables.

The DDL is attached to ``Base.metadata`` so that ``create_all`` /
``drop_all`` (tests, seed) and the Alembic migration share one definition.
"""

from sqlalchemy import DDL, event

from brokerage.core.constants import MANAGER_EMPLOYEE_VIEW
from brokerage.models.base import Base

MANAGER_EMPLOYEE_VIEW_SQL = f"""
    CREATE OR REPLACE VIEW {MANAGER_EMPLOYEE_VIEW} AS
    SELECT
        m.employee_id AS manager_id,
        e.employee_id AS employee_id,
        m.first_name AS manager_first_name,
        m.last_name AS manager_last_name,
        e.first_name AS employee_first_name,
        e.last_name AS employee_last_name,
        o.address AS office_address,
        o.city AS office_city
    FROM employees e
    JOIN manages man ON e.employee_id = man.employee_id
    JOIN employees m ON man.manager_id = m.employee_id
    JOIN offices o ON e.office_id = o.office_id
"""

DROP_MANAGER_EMPLOYEE_VIEW_SQL = f"DROP VIEW IF EXISTS {MANAGER_EMPLOYEE_VIEW}"

event.listen(Base.metadata, "after_create", DDL(MANAGER_EMPLOYEE_VIEW_SQL))
event.listen(Base.metadata, "before_drop", DDL(DROP_MANAGER_EMPLOYEE_VIEW_SQL))
