"""
Error taxonomy for the catalog.

Each error carries the HTTP status the boundary answers with, so routes can
raise freely and a single exception handler renders the response.
"""


class CatalogError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(CatalogError):
    """Malformed or missing input: undecodable body, empty description, bad id."""
    status_code = 400


class ConflictError(CatalogError):
    """A place with the same name already exists."""
    status_code = 409


class NotFoundError(CatalogError):
    """Id outside the current bounds of the registry."""
    status_code = 404


class StorageError(CatalogError):
    """The snapshot file could not be read or written."""
    status_code = 500
