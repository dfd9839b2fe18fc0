"""State-changing requests for clients."""
from src.app.core.domain.models import Client
from src.shared.mediator.requests import Command


class CreateClientCommand(Command[Client]):
    id: str
    name: str
    age: int
    gender: str
    email: str
    contact: str


class UpdateClientCommand(Command[Client]):
    """Overwrite every mutable field of an existing client."""
    id: str
    name: str
    age: int
    gender: str
    email: str
    contact: str


class DeleteClientCommand(Command[bool]):
    id: str
