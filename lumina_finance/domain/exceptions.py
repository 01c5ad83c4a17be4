"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class DealLockedError(DomainException):
    """Deal is closed and the caller has not unlocked it"""

    pass
