"""Domain-level exceptions.

Expected request branches (missing id, missing record, invalid input) are
not errors; they come back as outcomes. These exceptions cover rule
violations the storage layer refuses to carry out, so the CLI layer can
catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""
