"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Services wrap repository calls with tracing and hold the rules that
    span more than one entity. Store failures propagate unchanged.
    """

    pass
