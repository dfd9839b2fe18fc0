"""Storage contract consumed by the client handlers."""
from abc import ABC, abstractmethod
from typing import Optional

from src.app.core.domain.models import Client


class ClientRepositoryPort(ABC):
    """
    Abstract storage for clients.

    Implementations must be safe for concurrent use by simultaneous requests,
    return independent Client copies, and raise StorageError (never raw
    provider exceptions) when the store cannot complete an operation.
    """

    @abstractmethod
    async def get_all_clients(self) -> list[Client]:
        """
        Get every stored client.

        Returns:
            All clients, in no guaranteed order

        Raises:
            StorageError: If the store is unavailable
        """
        pass

    @abstractmethod
    async def get_client_by_id(self, client_id: str) -> Optional[Client]:
        """
        Get a client by ID.

        Returns:
            The client, or None if no client has this ID

        Raises:
            StorageError: If the store is unavailable
        """
        pass

    @abstractmethod
    async def add_client(self, client: Client) -> None:
        """
        Insert a new client.

        Raises:
            ConflictingEntityFound: If a client with the same ID already exists
            StorageError: If the store is unavailable
        """
        pass

    @abstractmethod
    async def update_client(self, client: Client) -> None:
        """
        Replace the stored client with the same ID (inserts when absent).

        Raises:
            StorageError: If the store is unavailable
        """
        pass

    @abstractmethod
    async def delete_client(self, client_id: str) -> None:
        """
        Remove the client with this ID; a missing ID is a no-op.

        Raises:
            StorageError: If the store is unavailable
        """
        pass
