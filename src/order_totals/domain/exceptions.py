"""Domain-level exceptions.

All failures are expressed as subclasses of DomainException so the CLI
layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A value could not be turned into a valid domain object."""


class InvalidInputError(DomainException):
    """The formatter was handed something that is not an order."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""
