"""Typed async HTTP client for the Client Registry API."""
from src.sdk.registry_client import RegistryClient
from src.sdk.schemas import ClientResponse, CreateClientRequest, UpdateClientRequest

__all__ = [
    "RegistryClient",
    "ClientResponse",
    "CreateClientRequest",
    "UpdateClientRequest",
]
