"""PostgreSQL implementation of Comment repository."""

from datetime import datetime

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from blog.domain.model import Comment, CommentThreadEntry
from blog.domain.repository import CommentRepository
from blog.domain.value import CommentId, UserId
from blog.persistence.error import RecordNotFoundError
from blog.persistence.mappers import comment_to_dict, row_to_comment_thread_entry
from blog.persistence.tables import comments_table, users_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository.

    Writes run inside a SAVEPOINT so a failed statement is rolled back on
    its own and leaves the request session usable.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def create(self, comment: Comment) -> CommentThreadEntry:
        """Insert a comment and select it back joined with its author."""
        async with self.session.begin_nested():
            await self.session.execute(
                insert(comments_table).values(**comment_to_dict(comment))
            )

        stmt = (
            select(
                comments_table.c.id,
                comments_table.c.message,
                comments_table.c.parent_id,
                comments_table.c.created_at,
                users_table.c.id.label("user_id"),
                users_table.c.name.label("user_name"),
            )
            .select_from(
                comments_table.join(
                    users_table, comments_table.c.user_id == users_table.c.id
                )
            )
            .where(comments_table.c.id == comment.id)
        )
        result = await self.session.execute(stmt)
        return row_to_comment_thread_entry(result.one()._asdict())

    async def get_owner_id(self, comment_id: CommentId) -> UserId:
        """Look up who wrote a comment."""
        stmt = select(comments_table.c.user_id).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        user_id = result.scalar_one_or_none()
        if user_id is None:
            raise RecordNotFoundError("Comment", str(comment_id))
        return UserId(user_id)

    async def update_message(self, comment_id: CommentId, message: str) -> str:
        """Replace the message of a comment."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(message=message, updated_at=datetime.now())
            .returning(comments_table.c.message)
        )
        async with self.session.begin_nested():
            result = await self.session.execute(stmt)
            updated = result.scalar_one_or_none()

        if updated is None:
            raise RecordNotFoundError("Comment", str(comment_id))
        return updated

    async def delete(self, comment_id: CommentId) -> CommentId:
        """Delete a comment; replies and likes cascade in the database."""
        stmt = (
            delete(comments_table)
            .where(comments_table.c.id == comment_id)
            .returning(comments_table.c.id)
        )
        async with self.session.begin_nested():
            result = await self.session.execute(stmt)
            deleted = result.scalar_one_or_none()

        if deleted is None:
            raise RecordNotFoundError("Comment", str(comment_id))
        return CommentId(deleted)
