"""Handlers for state-changing client requests."""
import logging

from src.app.core.domain.models import Client
from src.app.core.ports.client_repository import ClientRepositoryPort
from src.app.core.requests.commands import CreateClientCommand, DeleteClientCommand, UpdateClientCommand
from src.shared.exceptions import EntityNotFound
from src.shared.mediator.handler import RequestHandler

logger = logging.getLogger(__name__)


class CreateClientHandler(RequestHandler[CreateClientCommand, Client]):
    """
    Create a client with the caller-supplied ID.

    Uniqueness is left to the store: a duplicate ID surfaces as
    ConflictingEntityFound from the repository.
    """

    request_type = CreateClientCommand

    def __init__(self, repository: ClientRepositoryPort):
        self.repository = repository

    async def handle(self, request: CreateClientCommand) -> Client:
        client = Client(
            id=request.id,
            name=request.name,
            age=request.age,
            gender=request.gender,
            email=request.email,
            contact=request.contact,
        )

        await self.repository.add_client(client)
        logger.info("Created client %s", client.id)
        return client


class UpdateClientHandler(RequestHandler[UpdateClientCommand, Client]):
    """Overwrite all mutable fields of an existing client."""

    request_type = UpdateClientCommand

    def __init__(self, repository: ClientRepositoryPort):
        self.repository = repository

    async def handle(self, request: UpdateClientCommand) -> Client:
        client = await self.repository.get_client_by_id(request.id)
        if client is None:
            raise EntityNotFound("Client", request.id)

        client.name = request.name
        client.age = request.age
        client.gender = request.gender
        client.email = request.email
        client.contact = request.contact

        await self.repository.update_client(client)
        logger.info("Updated client %s", client.id)
        return client


class DeleteClientHandler(RequestHandler[DeleteClientCommand, bool]):
    request_type = DeleteClientCommand

    def __init__(self, repository: ClientRepositoryPort):
        self.repository = repository

    async def handle(self, request: DeleteClientCommand) -> bool:
        client = await self.repository.get_client_by_id(request.id)
        if client is None:
            raise EntityNotFound("Client", request.id)

        await self.repository.delete_client(request.id)
        logger.info("Deleted client %s", request.id)
        return True
