"""Domain error taxonomy

Every error raised below the use-case boundary is one of these. ``code`` is the
closed set of kinds the presentation layer maps to responses.
"""


class PullTabError(Exception):
    """Base error for the pull-tab engine"""

    code = "internal"


class OutOfInventoryError(PullTabError):
    """No ticket slot left in the selected game box"""

    code = "resource_exhausted"


class InvalidArgumentError(PullTabError):
    """Caller supplied a malformed argument"""

    code = "invalid_argument"


class NotFoundError(PullTabError):
    """Requested record does not exist for the caller"""

    code = "not_found"


class TicketNotFoundError(NotFoundError):
    def __init__(self, message: str = "Ticket not found"):
        super().__init__(message)


class StatisticsNotFoundError(NotFoundError):
    def __init__(self, message: str = "Statistics not found"):
        super().__init__(message)


class TransactionFailedError(PullTabError):
    """Unit of work could not be committed, nothing was persisted"""

    retryable = False


class TransactionConflictError(TransactionFailedError):
    """Concurrent writer touched the same record, the whole unit of work may be retried"""

    retryable = True
