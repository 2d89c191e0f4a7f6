"""Identifiers for users, posts and comments.

All three are UUIDs assigned by the database; the NewTypes keep a post id
from being passed where a comment id is expected. Likes have no id of
their own and are addressed by (UserId, CommentId).
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
PostId = NewType("PostId", UUID)
CommentId = NewType("CommentId", UUID)
