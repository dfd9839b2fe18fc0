"""Queries and commands accepted by the client mediator."""
from src.app.core.requests.commands import CreateClientCommand, DeleteClientCommand, UpdateClientCommand
from src.app.core.requests.queries import GetAllClientsQuery, GetClientByIdQuery

__all__ = [
    "GetAllClientsQuery",
    "GetClientByIdQuery",
    "CreateClientCommand",
    "UpdateClientCommand",
    "DeleteClientCommand",
]
