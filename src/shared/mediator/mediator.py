import logging
from types import MappingProxyType
from typing import Any, Iterable, Mapping, TypeVar

from src.shared.exceptions import DuplicateHandlerRegistration, HandlerNotRegistered
from src.shared.mediator.handler import RequestHandler
from src.shared.mediator.requests import Request

logger = logging.getLogger(__name__)

TResult = TypeVar("TResult")


class Mediator:
    """
    Routes a request instance to the single handler registered for its type.

    The handler table is built once from the handlers passed in and is read-only
    afterwards. Lookup uses the exact request class; subclasses of a registered
    request type are not matched.
    """

    def __init__(self, handlers: Iterable[RequestHandler[Any, Any]]):
        table: dict[type[Request], RequestHandler[Any, Any]] = {}
        for handler in handlers:
            request_type = handler.request_type
            if request_type in table:
                raise DuplicateHandlerRegistration(request_type)
            table[request_type] = handler
        self._handlers: Mapping[type[Request], RequestHandler[Any, Any]] = MappingProxyType(table)

    @property
    def registered_types(self) -> frozenset[type[Request]]:
        return frozenset(self._handlers)

    def handler_for(self, request_type: type[Request]) -> RequestHandler[Any, Any]:
        """
        Resolve the handler registered for a request type.

        Raises:
            HandlerNotRegistered: If no handler serves this exact type
        """
        try:
            return self._handlers[request_type]
        except KeyError:
            raise HandlerNotRegistered(request_type) from None

    async def send(self, request: Request[TResult]) -> TResult:
        """
        Dispatch a request and return the handler's result.

        Exceptions raised by the handler propagate unchanged.
        """
        handler = self.handler_for(type(request))
        logger.debug("Dispatching %s to %s", type(request).__name__, type(handler).__name__)
        return await handler.handle(request)
