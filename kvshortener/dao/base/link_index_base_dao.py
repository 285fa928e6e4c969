"""Abstract base class for the link index.

Key-value stores generally cannot enumerate their keys cheaply, so the set of
known shortcodes is kept as a separate index. The index is best-effort: it
may briefly list codes whose records are already gone. Readers are expected
to drop and prune such entries (see LinkLifecycleManager.enumerate()).
"""

from abc import ABC, abstractmethod


class LinkIndexBaseDAO(ABC):
    """Interface for the enumerable index of shortcodes

    Methods:
        add(shortcode: str) -> bool:
            Register a shortcode. Re-adding keeps its original position.
            Returns True if the shortcode was not indexed yet.

        remove(shortcode: str) -> bool:
            Unregister a shortcode. Returns True if it was indexed.

        members() -> list[str]:
            All indexed shortcodes, oldest first.

        prune(shortcodes: list[str]) -> int:
            Unregister many shortcodes at once. Returns how many were removed.

    All methods raise DataStoreError on connection or read/write failure.
    """

    @abstractmethod
    def add(self, shortcode: str, **kwargs) -> bool:
        pass

    @abstractmethod
    def remove(self, shortcode: str, **kwargs) -> bool:
        pass

    @abstractmethod
    def members(self, **kwargs) -> list[str]:
        pass

    @abstractmethod
    def prune(self, shortcodes: list[str], **kwargs) -> int:
        pass
