class BrokerageError(Exception):
    """Base class for all brokerage domain exceptions.

    Every custom exception in this module inherits from here so that a
    single ``except BrokerageError`` clause can catch any domain error.
    """

    def __init__(self, detail: str = "An error occurred"):
        self.detail = detail
        super().__init__(detail)


class TransactionNotFoundError(BrokerageError):
    """Raised when a requested transaction does not exist."""

    def __init__(self, detail: str = "Transaction not found"):
        super().__init__(detail)


class EmployeeNotFoundError(BrokerageError):
    """Raised when a requested employee does not exist (or has no manager)."""

    def __init__(self, detail: str = "Employee not found"):
        super().__init__(detail)


class PropertyNotFoundError(BrokerageError):
    """Raised when a transaction references an unknown property."""

    def __init__(self, detail: str = "Property not found"):
        super().__init__(detail)


class InvalidReportParameterError(BrokerageError):
    """Raised when a report is invoked with an unusable parameter.

    Missing *data* never raises; joins and null handling decide what a
    report returns.  This is only for caller mistakes such as a blank
    department filter or a non-positive cutoff.
    """

    def __init__(self, detail: str = "Invalid report parameter"):
        super().__init__(detail)
