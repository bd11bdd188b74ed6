"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidInputError(DomainException):
    """Deposit input is outside the range the calculator accepts"""

    pass


class CalculationError(DomainException):
    """Maturity calculation produced a non-finite result"""

    pass


class AdvisoryUnavailableError(DomainException):
    """Text-generation service failed, timed out, or returned malformed data"""

    pass
