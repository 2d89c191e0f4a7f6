"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to change a comment they don't own."""

    message = "You do not have permission to edit this message"

    def __init__(self, comment_id: str, user_id: str):
        self.comment_id = comment_id
        self.user_id = user_id
        super().__init__(self.message)


class IdentityBootstrapError(DomainError):
    """Raised when the fixed current user cannot be resolved at startup."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Current user not found: {name}")
