"""Like entity.

A like row means its user endorsed its comment. It has no identity beyond
the (user, comment) pair; counts are derived, never stored.
"""

from blog.domain.model.common import DomainModel
from blog.domain.value import CommentId, UserId


class Like(DomainModel):
    """Like join entity."""

    user_id: UserId
    comment_id: CommentId
