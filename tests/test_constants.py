from brokerage.core.constants import (
    CLIENT_RATING_CHECK_CLAUSE,
    EVENT_TYPES,
    LISTING_STATUS_CHECK_CLAUSE,
    MAX_RATING,
    MIN_RATING,
    NOT_RATED,
    RATING_VALUES,
    SOLD_TERMS,
    TERMS_CHECK_CLAUSE,
    TRANSACTION_TERMS,
)
from brokerage.models import ClientFeedback
from brokerage.schemas.common import EventType, Rating, TransactionTerms


class TestConstantsConsistency:
    """Verify that constants, enums, and CHECK clauses stay in sync."""

    def test_terms_match_enum(self):
        assert TRANSACTION_TERMS == {t.value for t in TransactionTerms}

    def test_event_types_match_enum(self):
        assert EVENT_TYPES == {e.value for e in EventType}

    def test_sold_is_a_valid_term_and_status(self):
        assert SOLD_TERMS in TRANSACTION_TERMS
        assert f"'{SOLD_TERMS}'" in LISTING_STATUS_CHECK_CLAUSE

    def test_rating_scale(self):
        numeric = {str(n) for n in range(MIN_RATING, MAX_RATING + 1)}
        assert RATING_VALUES == numeric | {NOT_RATED}
        assert Rating.NOT_RATED.value == "Not Rated"

    def test_terms_check_clause_lists_every_value(self):
        for term in TransactionTerms:
            assert f"'{term.value}'" in TERMS_CHECK_CLAUSE
        assert TERMS_CHECK_CLAUSE.startswith("terms IN (")

    def test_rating_check_clause_accepts_not_rated(self):
        assert f"'{NOT_RATED}'" in CLIENT_RATING_CHECK_CLAUSE

    def test_feedback_defaults_to_not_rated(self):
        default = ClientFeedback.__table__.c.client_rating.server_default
        assert default.arg == NOT_RATED
