"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidInputError(DomainException):
    """Applicant profile, savings goal or budget failed validation"""

    pass


class AdvisorServiceError(DomainException):
    """Text-generation service timed out, errored or returned garbage"""

    pass


class SchemeNotFoundError(DomainException):
    """No government scheme with the requested name"""

    pass
