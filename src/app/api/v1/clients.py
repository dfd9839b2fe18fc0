from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from dependency_injector.wiring import Provide, inject

from src.app.containers import Container
from src.app.core.requests import (
    DeleteClientCommand,
    GetAllClientsQuery,
    GetClientByIdQuery,
)
from src.sdk.schemas import CreateClientRequest, UpdateClientRequest, ClientResponse
from src.app.api.mappers import to_client_response, to_create_command, to_update_command
from src.shared.exceptions import EntityNotFound, ConflictingEntityFound, StorageError
from src.shared.mediator.mediator import Mediator
from src.app.logging import get_logger

router = APIRouter(prefix="/clients", tags=["clients"])
logger = get_logger(__name__)


def _storage_unavailable(e: StorageError) -> HTTPException:
    logger.error(f"Client store unavailable: {e}")
    return HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e))


@router.get("", response_model=list[ClientResponse])
@inject
async def list_clients(
    mediator: Mediator = Depends(Provide[Container.mediator]),
) -> list[ClientResponse]:
    """List all clients."""
    try:
        clients = await mediator.send(GetAllClientsQuery())
    except StorageError as e:
        raise _storage_unavailable(e)
    return [to_client_response(client) for client in clients]


@router.get("/{client_id}", response_model=ClientResponse)
@inject
async def get_client(
    client_id: str,
    mediator: Mediator = Depends(Provide[Container.mediator]),
) -> ClientResponse:
    """Get a client by ID."""
    try:
        client = await mediator.send(GetClientByIdQuery(id=client_id))
    except StorageError as e:
        raise _storage_unavailable(e)

    if client is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(EntityNotFound("Client", client_id)),
        )
    return to_client_response(client)


@router.post("", response_model=ClientResponse, status_code=status.HTTP_201_CREATED)
@inject
async def create_client(
    body: CreateClientRequest,
    request: Request,
    response: Response,
    mediator: Mediator = Depends(Provide[Container.mediator]),
) -> ClientResponse:
    """
    Create a new client.

    The response carries a Location header pointing at the new client.

    Raises:
        HTTPException 409: If a client with the same ID already exists
        HTTPException 503: If the client store is unavailable
    """
    try:
        client = await mediator.send(to_create_command(body))
    except ConflictingEntityFound as e:
        logger.error(f"Failed to create client: {e}")
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except StorageError as e:
        raise _storage_unavailable(e)

    response.headers["Location"] = str(request.url_for("get_client", client_id=client.id))
    return to_client_response(client)


@router.put("/{client_id}", response_model=ClientResponse)
@inject
async def update_client(
    client_id: str,
    body: UpdateClientRequest,
    mediator: Mediator = Depends(Provide[Container.mediator]),
) -> ClientResponse:
    """Replace every field of an existing client."""
    try:
        client = await mediator.send(to_update_command(client_id, body))
    except EntityNotFound as e:
        logger.error(f"Failed to update client: {e}")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except StorageError as e:
        raise _storage_unavailable(e)
    return to_client_response(client)


@router.delete("/{client_id}", status_code=status.HTTP_204_NO_CONTENT)
@inject
async def delete_client(
    client_id: str,
    mediator: Mediator = Depends(Provide[Container.mediator]),
) -> Response:
    """Delete a client."""
    try:
        await mediator.send(DeleteClientCommand(id=client_id))
    except EntityNotFound as e:
        logger.error(f"Failed to delete client: {e}")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except StorageError as e:
        raise _storage_unavailable(e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
