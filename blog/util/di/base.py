"""Base classes for dependency injection providers."""

from typing import ClassVar, Literal

from dishka import Provider

# Components that tests can swap for an in-memory implementation
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Base for every provider listed in ``PROVIDERS``.

    A provider that subclasses this directly is concrete and always used.
    A provider that names a ``__mock_component__`` is a component base: it
    gets one production subclass and one mock subclass (``__is_mock__``),
    and the container builder picks between them.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
