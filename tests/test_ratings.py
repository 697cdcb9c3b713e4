from brokerage.core.ratings import safe_rating_sql


class TestSafeRatingSql:
    def test_guards_cast_with_pattern(self):
        sql = safe_rating_sql("c.client_rating")
        assert sql.startswith("CASE WHEN c.client_rating ~")
        assert "CAST(TRIM(c.client_rating) AS INTEGER)" in sql
        # no ELSE branch: unparsable ratings become NULL
        assert "ELSE" not in sql

    def test_pattern_only_admits_digits(self):
        sql = safe_rating_sql("f.employee_rating")
        assert r"'^\s*[0-9]+\s*$'" in sql
