"""Request markers for command/query dispatch."""
from typing import Generic, TypeVar

from pydantic import BaseModel

TResult = TypeVar("TResult")


class Request(BaseModel, Generic[TResult]):
    """
    Base class for every dispatchable request.

    The type parameter names the result the single registered handler returns,
    so ``Mediator.send`` can be typed end to end. Requests are immutable data
    with no behavior.
    """

    model_config = {"frozen": True}


class Query(Request[TResult], Generic[TResult]):
    """A read-only request."""


class Command(Request[TResult], Generic[TResult]):
    """A state-changing request."""
