"""Abstract base class for Link data access objects (DAOs).

This class establishes a consistent contract for all Link DAO implementations,
regardless of the underlying key-value store (e.g., Redis, DynamoDB).

Responsibilities:
    - Provide an interface for inserting, retrieving, rewriting and deleting LinkModel objects.
    - Standardize error handling across multiple data store implementations.
    - Keep the store's own expiry (TTL) in line with each link's `expires_at`.

Example:
    Typical usage with a datastore-specific implementation:

        >>> from kvshortener.models import LinkModel
        >>> from kvshortener.dao.redis import LinkRedisDAO

        >>> dao = LinkRedisDAO(...)
        >>> dao.insert(link)
        >>> dao.get('a1b2c3').content
        'https://example.com/blog/article-123'
        >>> dao.delete('a1b2c3')
        True
"""

from abc import ABC, abstractmethod

from kvshortener.models import LinkModel


class LinkBaseDAO(ABC):
    """Interface for Link data access objects (DAOs)

    Methods:
        exists(shortcode: str, **kwargs) -> bool:
            Check whether a record is stored under a shortcode.

        insert(link: LinkModel, overwrite: bool = False, **kwargs) -> LinkBaseDAO:
            Store a new LinkModel with a TTL matching its expiry.
            Raises LinkAlreadyExistsError if the shortcode is taken and overwrite is False.

        get(shortcode: str, **kwargs) -> LinkModel:
            Retrieve a LinkModel by shortcode.
            Raises LinkNotFoundError if the entry does not exist.

        update(link: LinkModel, **kwargs) -> LinkBaseDAO:
            Re-persist an existing LinkModel, recomputing the remaining TTL.

        delete(shortcode: str, **kwargs) -> bool:
            Delete a record. Returns False if nothing was stored.

    All methods raise DataStoreError on connection or read/write failure.
    """

    @abstractmethod
    def exists(self, shortcode: str, **kwargs) -> bool:
        pass

    @abstractmethod
    def insert(self, link: LinkModel, overwrite: bool = False, **kwargs) -> 'LinkBaseDAO':
        """Insert a new LinkModel into the data store.

        Args:
            link (LinkModel):
                The LinkModel instance to be inserted.

            overwrite (bool):
                If True, silently replace any record stored under the same shortcode.

        Returns:
            LinkBaseDAO: self (for method chaining)

        Raises:
            LinkAlreadyExistsError:
                If the shortcode is already taken and overwrite is False.

            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def get(self, shortcode: str, **kwargs) -> LinkModel:
        """Retrieve a LinkModel from the data store by its shortcode.

        Raises:
            LinkNotFoundError:
                If no LinkModel with the given shortcode exists.

            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def update(self, link: LinkModel, **kwargs) -> 'LinkBaseDAO':
        """Rewrite a LinkModel, keeping its original expiry time.

        NOTE: this is a plain write, not a compare-and-swap. Two concurrent
              read-modify-write cycles on the same link may lose an update.
        """
        pass

    @abstractmethod
    def delete(self, shortcode: str, **kwargs) -> bool:
        pass
