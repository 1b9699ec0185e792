"""Domain-level exceptions.

All recoverable business rule violations are expressed as subclasses of
DomainException so the CLI layer can catch them uniformly and display
user-friendly messages.

InvariantViolation deliberately sits outside that hierarchy: it signals a
bug (e.g. stock driven below zero), not something the operator can fix.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class DuplicateCodeError(ValidationError):
    """A product code collides with an existing product."""

    def __init__(self, code: str) -> None:
        super().__init__(f"Product code '{code}' is already in use")
        self.code = code
        self.field = "code"


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class InvariantViolation(Exception):
    """Internal consistency was broken. Never raised by correct callers."""
