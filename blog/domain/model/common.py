"""Base model for all domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for domain entities and read projections.

    Instances are immutable; derive changed copies with ``model_copy``.
    """

    model_config = ConfigDict(frozen=True)
