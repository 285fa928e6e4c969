"""Exceptions related to Data Access Objects (DAO) operations.

Classes:
    DAOError:
        Generic base class for DAO-related exceptions.

    LinkNotFoundError:
        Raised when a LinkModel is not found in the data store.

    LinkAlreadyExistsError:
        Raised when attempting to insert a LinkModel under a taken shortcode.

    DataStoreError:
        Raised when there is an error in the data store (e.g., connection issues, timeouts, corrupt records, etc.).

Example:
    >>> from kvshortener.dao.exceptions import LinkNotFoundError
    >>> raise LinkNotFoundError("Link with code 'abc123' not found.")
    Traceback (most recent call last):
        ...
    kvshortener.dao.exceptions.LinkNotFoundError: Link with code 'abc123' not found.
"""


class DAOError(Exception):
    """Generic base class for DAO-related exceptions."""

    error_code = 'dao:dao_error'


class LinkNotFoundError(DAOError):
    """Exception raised when a LinkModel is not found in the data store."""

    error_code = 'dao:link_not_found_error'


class LinkAlreadyExistsError(DAOError):
    """Exception raised when attempting to insert a LinkModel whose shortcode is already taken."""

    error_code = 'dao:link_already_exists_error'


class DataStoreError(DAOError):
    """Exception raised when there is an error in the data store.

    e.g. connection issues, timeouts, OOM, corrupt records, etc.
    """

    error_code = 'dao:data_store_error'
