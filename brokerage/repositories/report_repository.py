from datetime import date

from brokerage.core.ratings import safe_rating_sql
from brokerage.repositories.base import BaseRepository, Rows

_AS_OF = "CAST(:as_of AS DATE)"


class ReportRepository(BaseRepository):
    """Encapsulates every reporting SQL query.

    Join type is part of each report's contract: outer joins keep
    zero-activity rows, inner joins drop them.  Dates are compared with
    the ``:as_of`` parameter rather than ``CURRENT_DATE`` so callers (and
    tests) control the reporting day.
    """

    # --- Employee performance ---

    _SQL_TOP_PERFORMERS = f"""
        WITH ranked_performance AS (
            SELECT
                employee_id,
                SUM(performance_amount) AS total_performance_amount,
                RANK() OVER (ORDER BY SUM(performance_amount) DESC)
                    AS performance_rank
            FROM employee_performance
            WHERE performance_date >= {_AS_OF} - make_interval(months => :window_months)
              AND performance_date <= {_AS_OF}
              AND performance_amount IS NOT NULL
            GROUP BY employee_id
        )
        SELECT employee_id, total_performance_amount, performance_rank
        FROM ranked_performance
        WHERE performance_rank <= :cutoff
        ORDER BY performance_rank, employee_id
    """

    async def top_performers(
        self,
        *,
        as_of: date,
        cutoff: int,
        window_months: int,
        skip: int = 0,
        limit: int = 50,
    ) -> Rows:
        """Performance sums over the trailing window, competition-ranked."""
        return await self._execute_offset(
            self._SQL_TOP_PERFORMERS,
            skip=skip,
            limit=limit,
            extra_params={
                "as_of": as_of,
                "cutoff": cutoff,
                "window_months": window_months,
            },
        )

    _SQL_SALES_RANKING = """
        SELECT
            t.employee_id,
            e.first_name,
            e.last_name,
            e.department,
            SUM(t.transaction_amount) AS total_sales,
            RANK() OVER (ORDER BY SUM(t.transaction_amount) DESC) AS sales_rank
        FROM transactions t
        JOIN employees e ON t.employee_id = e.employee_id
        WHERE LOWER(e.department) = LOWER(:department)
          AND t.transaction_amount IS NOT NULL
        GROUP BY t.employee_id, e.first_name, e.last_name, e.department
        ORDER BY sales_rank, t.employee_id
    """

    async def sales_ranking(
        self,
        *,
        department: str,
        skip: int = 0,
        limit: int = 50,
    ) -> Rows:
        return await self._execute_offset(
            self._SQL_SALES_RANKING,
            skip=skip,
            limit=limit,
            extra_params={"department": department},
        )

    _SQL_UNDERPERFORMERS = f"""
        SELECT e.employee_id, e.first_name, e.last_name
        FROM employees e
        WHERE NOT EXISTS (
            SELECT 1
            FROM employee_performance ep
            WHERE ep.employee_id = e.employee_id
              AND {safe_rating_sql('ep.employee_rating')} >= :min_rating
              AND ep.performance_date >= {_AS_OF} - make_interval(months => :window_months)
              AND ep.performance_date <= {_AS_OF}
        )
        ORDER BY e.employee_id
    """

    async def underperformers(
        self,
        *,
        as_of: date,
        window_months: int,
        min_rating: int,
        skip: int = 0,
        limit: int = 50,
    ) -> Rows:
        """Employees with no rating ≥ *min_rating* in the window.

        ``Not Rated`` and unparsable ratings cast to NULL, so they never
        satisfy the threshold; employees without any record qualify.
        """
        return await self._execute_offset(
            self._SQL_UNDERPERFORMERS,
            skip=skip,
            limit=limit,
            extra_params={
                "as_of": as_of,
                "window_months": window_months,
                "min_rating": min_rating,
            },
        )

    # --- Listings & sales ---

    async def days_on_market(
        self,
        *,
        include_unsold: bool = False,
        skip: int = 0,
        limit: int = 50,
    ) -> Rows:
        """Days between listing and the earliest transaction.

        Inner join by default: listings without a transaction are left
        out.  With *include_unsold* they appear with NULL ``sold_date``
        and ``days_on_market``.
        """
        join = "LEFT JOIN" if include_unsold else "JOIN"
        sql = f"""
            WITH listed_properties AS (
                SELECT
                    pl.property_id,
                    pl.listing_date,
                    MIN(t.transaction_date) AS sold_date
                FROM property_listings pl
                {join} transactions t ON pl.property_id = t.property_id
                GROUP BY pl.property_id, pl.listing_date
            )
            SELECT
                lp.property_id,
                lp.listing_date,
                lp.sold_date,
                lp.sold_date - lp.listing_date AS days_on_market
            FROM listed_properties lp
            ORDER BY lp.property_id
        """
        return await self._execute_offset(sql, skip=skip, limit=limit)

    async def rented_vs_sold_by_agent(
        self,
        *,
        skip: int = 0,
        limit: int = 50,
    ) -> Rows:
        sql = """
            SELECT
                e.employee_id,
                e.first_name,
                e.last_name,
                COUNT(DISTINCT CASE WHEN pl.status = 'rented'
                    THEN pl.listing_id END) AS properties_rented,
                COUNT(DISTINCT CASE WHEN t.terms = 'sold'
                    THEN t.transaction_id END) AS properties_sold
            FROM employees e
            LEFT JOIN property_listings pl ON e.employee_id = pl.employee_id
            LEFT JOIN transactions t ON pl.property_id = t.property_id
            GROUP BY e.employee_id, e.first_name, e.last_name
            ORDER BY e.employee_id
        """
        return await self._execute_offset(sql, skip=skip, limit=limit)

    _SQL_QUARTERLY_SALES = f"""
        SELECT
            CAST(EXTRACT(QUARTER FROM transaction_date) AS INTEGER) AS quarter,
            CAST(EXTRACT(YEAR FROM transaction_date) AS INTEGER) AS year,
            SUM(transaction_amount) AS total_sales,
            SUM(brokerage_fee) AS total_fees
        FROM transactions
        WHERE transaction_date
            BETWEEN CAST(DATE_TRUNC('year', {_AS_OF}) AS DATE) AND {_AS_OF}
        GROUP BY 1, 2
        ORDER BY year, quarter
    """

    async def quarterly_sales(
        self,
        *,
        as_of: date,
        skip: int = 0,
        limit: int = 50,
    ) -> Rows:
        """Sales and brokerage fees per quarter of *as_of*'s year, to date."""
        return await self._execute_offset(
            self._SQL_QUARTERLY_SALES,
            skip=skip,
            limit=limit,
            extra_params={"as_of": as_of},
        )

    # --- Office financials ---

    async def office_payroll(
        self,
        *,
        skip: int = 0,
        limit: int = 50,
    ) -> Rows:
        sql = """
            SELECT
                o.office_id,
                o.city,
                SUM(p.salary_amount + COALESCE(p.bonus_amount, 0)) AS total_payroll
            FROM payroll p
            JOIN employees e ON p.employee_id = e.employee_id
            JOIN offices o ON e.office_id = o.office_id
            GROUP BY o.office_id, o.city
            ORDER BY o.office_id
        """
        return await self._execute_offset(sql, skip=skip, limit=limit)

    async def office_financial_summary(
        self,
        *,
        skip: int = 0,
        limit: int = 50,
    ) -> Rows:
        """Revenue, payroll, expenses and net profit for every office.

        Each measure is aggregated per office before the outer join so
        that payroll lines don't multiply transaction revenue (and vice
        versa).  Offices without activity report zeros.
        """
        sql = """
            WITH revenue AS (
                SELECT e.office_id, SUM(t.transaction_amount) AS amount
                FROM transactions t
                JOIN employees e ON t.employee_id = e.employee_id
                GROUP BY e.office_id
            ),
            payroll_costs AS (
                SELECT
                    e.office_id,
                    SUM(p.salary_amount + COALESCE(p.bonus_amount, 0)) AS amount
                FROM payroll p
                JOIN employees e ON p.employee_id = e.employee_id
                GROUP BY e.office_id
            ),
            expenses AS (
                SELECT office_id, SUM(amount) AS amount
                FROM financial_records
                GROUP BY office_id
            )
            SELECT
                o.office_id,
                o.address,
                COALESCE(r.amount, 0) AS revenue,
                COALESCE(pc.amount, 0) AS payroll_expenses,
                COALESCE(x.amount, 0) AS operational_expenses,
                COALESCE(r.amount, 0)
                    - (COALESCE(pc.amount, 0) + COALESCE(x.amount, 0))
                    AS net_profit
            FROM offices o
            LEFT JOIN revenue r ON o.office_id = r.office_id
            LEFT JOIN payroll_costs pc ON o.office_id = pc.office_id
            LEFT JOIN expenses x ON o.office_id = x.office_id
            ORDER BY o.office_id
        """
        return await self._execute_offset(sql, skip=skip, limit=limit)

    _SQL_OFFICE_SALES_YTD = f"""
        SELECT
            o.office_id,
            o.city,
            COUNT(t.transaction_id) AS total_sales,
            COALESCE(SUM(t.transaction_amount), 0) AS sales_volume
        FROM offices o
        LEFT JOIN employees e ON o.office_id = e.office_id
        LEFT JOIN transactions t
            ON e.employee_id = t.employee_id
           AND t.terms = 'sold'
           AND t.transaction_date
               BETWEEN CAST(DATE_TRUNC('year', {_AS_OF}) AS DATE) AND {_AS_OF}
        GROUP BY o.office_id, o.city
        ORDER BY sales_volume DESC, o.office_id
    """

    async def office_sales_ytd(
        self,
        *,
        as_of: date,
        skip: int = 0,
        limit: int = 50,
    ) -> Rows:
        return await self._execute_offset(
            self._SQL_OFFICE_SALES_YTD,
            skip=skip,
            limit=limit,
            extra_params={"as_of": as_of},
        )

    # --- Marketing ---

    async def campaign_effectiveness(
        self,
        *,
        skip: int = 0,
        limit: int = 50,
    ) -> Rows:
        sql = """
            SELECT
                mc.campaign_id,
                mc.campaign_name,
                COUNT(DISTINCT pl.property_id) AS number_of_properties,
                COALESCE(SUM(t.transaction_amount), 0) AS total_revenue
            FROM marketing_campaigns mc
            JOIN property_listings pl ON mc.property_id = pl.property_id
            LEFT JOIN transactions t ON pl.property_id = t.property_id
            GROUP BY mc.campaign_id, mc.campaign_name
            ORDER BY total_revenue DESC, mc.campaign_id
        """
        return await self._execute_offset(sql, skip=skip, limit=limit)

    _SQL_MARKETING_SPEND = f"""
        SELECT 'Income' AS type,
            COALESCE(SUM(transaction_amount), 0) AS amount
        FROM transactions
        WHERE transaction_date BETWEEN CAST(:since AS DATE) AND {_AS_OF}
          AND terms = 'sold'
        UNION ALL
        SELECT 'Marketing Expenditure' AS type,
            COALESCE(SUM(budget), 0) AS amount
        FROM marketing_campaigns
        WHERE start_date BETWEEN CAST(:since AS DATE) AND {_AS_OF}
    """

    async def marketing_spend(
        self,
        *,
        since: date,
        as_of: date,
        skip: int = 0,
        limit: int = 50,
    ) -> Rows:
        """Sales income vs. campaign budgets between *since* and *as_of*."""
        return await self._execute_offset(
            self._SQL_MARKETING_SPEND,
            skip=skip,
            limit=limit,
            extra_params={"since": since, "as_of": as_of},
        )

    # --- Agents & clients ---

    async def specialization_effectiveness(
        self,
        *,
        skip: int = 0,
        limit: int = 50,
    ) -> Rows:
        sql = """
            SELECT
                e.employee_id,
                e.first_name,
                e.last_name,
                s.specialization_area,
                COUNT(t.transaction_id) AS total_transactions,
                COALESCE(SUM(t.transaction_amount), 0) AS total_sales_volume
            FROM employees e
            JOIN agent_specializations s ON e.employee_id = s.employee_id
            LEFT JOIN transactions t
                ON e.employee_id = t.employee_id AND t.terms = 'sold'
            GROUP BY e.employee_id, e.first_name, e.last_name,
                     s.specialization_area
            ORDER BY total_sales_volume DESC, total_transactions DESC,
                     e.employee_id, s.specialization_area
        """
        return await self._execute_offset(sql, skip=skip, limit=limit)

    _SQL_CLIENT_RATINGS = f"""
        SELECT
            e.employee_id,
            e.first_name,
            e.last_name,
            ROUND(AVG({safe_rating_sql('c.client_rating')})) AS average_rating,
            COUNT({safe_rating_sql('c.client_rating')}) AS rated_feedback,
            COUNT(*) AS total_feedback
        FROM employees e
        JOIN client_feedback c ON e.employee_id = c.employee_id
        GROUP BY e.employee_id, e.first_name, e.last_name
        ORDER BY average_rating DESC NULLS LAST, e.employee_id
    """

    async def client_ratings(
        self,
        *,
        skip: int = 0,
        limit: int = 50,
    ) -> Rows:
        """Average client rating per employee, ``Not Rated`` excluded."""
        return await self._execute_offset(
            self._SQL_CLIENT_RATINGS, skip=skip, limit=limit
        )

    # --- Events ---

    _SQL_UPCOMING_EVENTS = f"""
        SELECT
            ev.event_id,
            ev.event_type,
            ev.event_date,
            ev.start_time,
            ev.end_time,
            pl.address AS property_address,
            pl.zip_code,
            COALESCE(CARDINALITY(ev.attendees), 0) AS number_of_attendees
        FROM events ev
        JOIN property_listings pl ON ev.property_id = pl.property_id
        WHERE ev.event_date >= {_AS_OF}
        ORDER BY ev.event_date, ev.start_time, ev.event_id
    """

    async def upcoming_events(
        self,
        *,
        as_of: date,
        skip: int = 0,
        limit: int = 50,
    ) -> Rows:
        return await self._execute_offset(
            self._SQL_UPCOMING_EVENTS,
            skip=skip,
            limit=limit,
            extra_params={"as_of": as_of},
        )
