"""Mappers for converting between domain models, requests and API schemas."""
from src.app.core.domain.models import Client
from src.app.core.requests import CreateClientCommand, UpdateClientCommand
from src.sdk.schemas import ClientResponse, CreateClientRequest, UpdateClientRequest


def to_client_response(client: Client) -> ClientResponse:
    """
    Convert a Client domain model to ClientResponse API schema.

    Args:
        client: Domain model

    Returns:
        API response schema
    """
    return ClientResponse(
        id=client.id,
        name=client.name,
        age=client.age,
        gender=client.gender,
        email=client.email,
        contact=client.contact,
    )


def to_create_command(request: CreateClientRequest) -> CreateClientCommand:
    return CreateClientCommand(
        id=request.id,
        name=request.name,
        age=request.age,
        gender=request.gender,
        email=request.email,
        contact=request.contact,
    )


def to_update_command(client_id: str, request: UpdateClientRequest) -> UpdateClientCommand:
    """Build an update command; the ID always comes from the URL path."""
    return UpdateClientCommand(
        id=client_id,
        name=request.name,
        age=request.age,
        gender=request.gender,
        email=request.email,
        contact=request.contact,
    )
