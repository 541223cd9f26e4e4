"""Abstract interface for the remote kit registry."""

from abc import ABC, abstractmethod


class KitRegistry(ABC):
    """Abstract interface for fetching documents from the kit registry.

    All implementations must implement this interface for testability.
    """

    @abstractmethod
    def kit_document_url(self, kit_id: str) -> str:
        """Return the URL of a kit's sidekit.json in this registry."""
        ...

    @abstractmethod
    async def fetch_kit_document(self, kit_id: str) -> str | None:
        """Fetch the raw sidekit.json text of a kit.

        Returns:
            The document text, or None if the registry has no such kit

        Raises:
            FetchError: If the registry answers with any other unexpected status
        """
        ...

    @abstractmethod
    async def fetch_index(self) -> str:
        """Fetch the raw registry.json text listing available kits.

        Raises:
            FetchError: If the registry does not answer with the document
        """
        ...
