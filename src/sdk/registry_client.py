"""HTTP client for consuming the Client Registry API."""
from typing import Optional
from httpx import AsyncClient, Response

from src.sdk.schemas import (
    CreateClientRequest,
    UpdateClientRequest,
    ClientResponse,
)


class RegistryClient:
    """HTTP client for interacting with the Client Registry API."""

    def __init__(self, base_url: str, client: Optional[AsyncClient] = None):
        """
        Initialize the registry client.

        Args:
            base_url: Base URL of the API (e.g., "http://localhost:8000")
            client: Optional httpx.AsyncClient instance. If not provided, a new one will be created.
        """
        self.base_url = base_url.rstrip("/")
        self._client = client
        self._owns_client = client is None

    async def __aenter__(self):
        """Async context manager entry."""
        if self._owns_client:
            self._client = AsyncClient(base_url=self.base_url)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        if self._owns_client and self._client:
            await self._client.aclose()

    @property
    def client(self) -> AsyncClient:
        """Get the underlying httpx client."""
        if self._client is None:
            raise RuntimeError("Client not initialized. Use async context manager.")
        return self._client

    async def list_clients(self) -> list[ClientResponse]:
        """
        List all clients.

        Raises:
            httpx.HTTPStatusError: If the request fails
        """
        response: Response = await self.client.get("/api/v1/clients")
        response.raise_for_status()
        return [ClientResponse(**client) for client in response.json()]

    async def get_client(self, client_id: str) -> ClientResponse:
        """
        Get a client by ID.

        Raises:
            httpx.HTTPStatusError: If the request fails (e.g., 404 if not found)
        """
        response: Response = await self.client.get(f"/api/v1/clients/{client_id}")
        response.raise_for_status()
        return ClientResponse(**response.json())

    async def create_client(self, request: CreateClientRequest) -> ClientResponse:
        """
        Create a new client.

        Args:
            request: Client creation request

        Returns:
            Created client response

        Raises:
            httpx.HTTPStatusError: If the request fails (e.g., 409 on a duplicate ID)
        """
        response: Response = await self.client.post(
            "/api/v1/clients",
            json=request.model_dump(mode="json")
        )
        response.raise_for_status()
        return ClientResponse(**response.json())

    async def update_client(self, client_id: str, request: UpdateClientRequest) -> ClientResponse:
        """
        Replace all fields of an existing client.

        Raises:
            httpx.HTTPStatusError: If the request fails (e.g., 404 if not found)
        """
        response: Response = await self.client.put(
            f"/api/v1/clients/{client_id}",
            json=request.model_dump(mode="json")
        )
        response.raise_for_status()
        return ClientResponse(**response.json())

    async def delete_client(self, client_id: str) -> None:
        """
        Delete a client.

        Raises:
            httpx.HTTPStatusError: If the request fails (e.g., 404 if not found)
        """
        response: Response = await self.client.delete(f"/api/v1/clients/{client_id}")
        response.raise_for_status()
