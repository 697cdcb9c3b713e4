from enum import Enum


class TransactionTerms(str, Enum):
    SOLD = "sold"
    RENTED = "rented"
    PENDING = "pending"
    CANCELLED = "cancelled"


class ListingStatus(str, Enum):
    AVAILABLE = "available"
    SOLD = "sold"
    RENTED = "rented"
    PENDING = "pending"
    WITHDRAWN = "withdrawn"


class Rating(str, Enum):
    """Client / performance rating on a 1–5 scale.

    ``NOT_RATED`` is a real value, not a missing one: it is stored as the
    literal ``'Not Rated'`` and excluded from every average and threshold.
    """

    ONE = "1"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    NOT_RATED = "Not Rated"


class EventType(str, Enum):
    open_house = "open_house"
    viewing = "viewing"
