"""Exception types raised by entities and entity stores.

File-system failures are not wrapped: they surface as the built-in ``OSError``
(of which ``IOError`` is an alias).
"""


class EntityStoreError(Exception):
    """Base class for all entity and store errors."""


class ValidationError(EntityStoreError, ValueError):
    """An entity field failed validation at construction or update."""


class DuplicateKeyError(EntityStoreError, ValueError):
    """An entity with the same id is already held by the store."""


class NullEntityError(EntityStoreError, TypeError):
    """``None`` was passed where an entity was required."""


class NotFoundError(EntityStoreError, LookupError):
    """No entity with the requested id exists in the store."""


class MalformedDataError(EntityStoreError, ValueError):
    """Persisted content could not be parsed into entities."""
