from abc import ABC, abstractmethod
from typing import ClassVar, Generic, TypeVar

from src.shared.mediator.requests import Request

TRequest = TypeVar("TRequest", bound=Request)
TResult = TypeVar("TResult")


class RequestHandler(ABC, Generic[TRequest, TResult]):
    """
    Executes exactly one request type.

    Subclasses set ``request_type`` to the concrete request class they serve;
    the mediator keys its table on it.
    """

    request_type: ClassVar[type[Request]]

    @abstractmethod
    async def handle(self, request: TRequest) -> TResult:
        """
        Execute the request.

        Args:
            request: Request instance of ``request_type``

        Returns:
            The result declared by the request type
        """
        pass
