"""PostgreSQL implementation of Post repository."""

from typing import List

from sqlalchemy import desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from blog.domain.model import PostDetail, PostSummary
from blog.domain.repository import PostRepository
from blog.domain.value import PostId
from blog.persistence.error import RecordNotFoundError
from blog.persistence.mappers import row_to_comment_thread_entry, row_to_post_summary
from blog.persistence.tables import (
    comments_table,
    likes_table,
    posts_table,
    users_table,
)


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_all(self) -> List[PostSummary]:
        """List every post as an (id, title) projection."""
        stmt = select(posts_table.c.id, posts_table.c.title)
        result = await self.session.execute(stmt)
        return [row_to_post_summary(row._asdict()) for row in result.fetchall()]

    async def get_detail(self, post_id: PostId) -> PostDetail:
        """Load a post with its comments, newest first."""
        post_stmt = select(
            posts_table.c.id, posts_table.c.title, posts_table.c.body
        ).where(posts_table.c.id == post_id)
        post_row = (await self.session.execute(post_stmt)).fetchone()
        if post_row is None:
            raise RecordNotFoundError("Post", str(post_id))

        # Like counts are derived per comment, never stored
        like_counts = (
            select(
                likes_table.c.comment_id,
                func.count().label("like_count"),
            )
            .group_by(likes_table.c.comment_id)
            .subquery()
        )

        comments_stmt = (
            select(
                comments_table.c.id,
                comments_table.c.message,
                comments_table.c.parent_id,
                comments_table.c.created_at,
                users_table.c.id.label("user_id"),
                users_table.c.name.label("user_name"),
                func.coalesce(like_counts.c.like_count, 0).label("like_count"),
            )
            .select_from(
                comments_table.join(
                    users_table, comments_table.c.user_id == users_table.c.id
                ).outerjoin(
                    like_counts, like_counts.c.comment_id == comments_table.c.id
                )
            )
            .where(comments_table.c.post_id == post_id)
            .order_by(desc(comments_table.c.created_at))
        )
        result = await self.session.execute(comments_stmt)

        return PostDetail(
            id=PostId(post_row.id),
            title=post_row.title,
            body=post_row.body,
            comments=[
                row_to_comment_thread_entry(row._asdict())
                for row in result.fetchall()
            ],
        )
