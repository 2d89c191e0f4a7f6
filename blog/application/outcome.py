"""Outcome wrapper for store calls.

Every use case routes its repository work through :func:`commit`, which
turns a raised store failure into an :class:`Err` value instead of an
exception. Callers unwrap the result: an ``Ok`` carries the value, an
``Err`` carries the failure's message and becomes a generic server error
at the interface layer.
"""

from dataclasses import dataclass
from typing import Awaitable, Generic, TypeVar, Union

import logfire

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful store operation."""

    value: T


@dataclass(frozen=True)
class Err:
    """Failed store operation."""

    message: str
    error_type: str = "Exception"


Outcome = Union[Ok[T], Err]


async def commit(operation: Awaitable[T]) -> Outcome[T]:
    """Await a store operation and capture any failure it raises.

    Args:
        operation: Awaitable produced by a repository or domain service call

    Returns:
        ``Ok`` with the operation's result, or ``Err`` with the message of
        the exception it raised
    """
    try:
        value = await operation
    except Exception as e:
        logfire.error(
            "Store operation failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=True,
        )
        return Err(message=str(e), error_type=type(e).__name__)
    return Ok(value)
