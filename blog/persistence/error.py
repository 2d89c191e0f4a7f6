"""Persistence layer errors."""


class PersistenceError(Exception):
    """Base persistence error."""

    pass


class RecordNotFoundError(PersistenceError):
    """Raised when a lookup that requires a row finds none."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
