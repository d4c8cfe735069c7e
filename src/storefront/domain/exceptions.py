"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EmptyOrderError(ValidationError):
    """An order was placed from a cart with no items in it."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class ItemNotFoundError(EntityNotFoundError):
    """No item with the requested name exists in the catalogue or cart."""


class CartFullError(DomainException):
    """The cart already holds the maximum number of items."""


class StorageError(DomainException):
    """An external catalogue source or customer store could not be used."""
