"""Domain-level exceptions.

Every rejected operation is expressed as a subclass of DomainException so
the store boundary can turn them into error results uniformly.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class EntityNotFoundError(DomainException):
    """A requested product does not exist."""


class InvalidOperationError(DomainException):
    """The requested mutation is invalid given the input or current state."""
