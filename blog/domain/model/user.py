"""User entity."""

from pydantic import Field

from blog.domain.model.common import DomainModel
from blog.domain.value import UserId


class User(DomainModel):
    """User entity.

    Users are not created through the API; they are seeded into the store.
    One of them is bootstrapped as the current user at startup.
    """

    id: UserId
    name: str = Field(min_length=1, max_length=255)


class Author(DomainModel):
    """The public projection of a user shown next to their comments."""

    id: UserId
    name: str
