"""Translate use case outcomes into HTTP responses."""

from typing import TypeVar

from fastapi import HTTPException, status

from blog.application.outcome import Err, Outcome

T = TypeVar("T")


def unwrap(outcome: Outcome[T]) -> T:
    """Return the value of a successful outcome.

    Raises:
        HTTPException: 500 carrying the store failure's message
    """
    if isinstance(outcome, Err):
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=outcome.message,
        )
    return outcome.value
