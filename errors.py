class CatalogError(Exception):
    """Base exception for catalog errors."""


class InvalidArgumentError(CatalogError, ValueError):
    """A required field (title, author, name, keyword) was not supplied."""


class NotFoundError(CatalogError, LookupError):
    """Requested book or member id does not exist in the catalog."""
