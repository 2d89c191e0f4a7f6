"""seed_users_and_posts

Seed the users the app can act as and two sample posts.

Revision ID: 9b4e07c5d2a1
Revises: 3f1c2a9d7b10
Create Date: 2026-10-12 10:31:47.902114

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "9b4e07c5d2a1"
down_revision: Union[str, Sequence[str], None] = "3f1c2a9d7b10"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

USERS = ["John", "Sally"]

POSTS = [
    (
        "Post 1",
        "Lorem ipsum dolor sit amet, consectetur adipiscing elit. Integer "
        "posuere erat a ante venenatis dapibus posuere velit aliquet.",
    ),
    (
        "Post 2",
        "Curabitur blandit tempus porttitor. Nullam quis risus eget urna "
        "mollis ornare vel eu leo. Donec ullamcorper nulla non metus.",
    ),
]


def upgrade() -> None:
    """Seed users and posts."""
    users_table = sa.table("users", sa.column("name", sa.String))
    posts_table = sa.table(
        "posts",
        sa.column("title", sa.String),
        sa.column("body", sa.Text),
    )

    op.bulk_insert(users_table, [{"name": name} for name in USERS])
    op.bulk_insert(
        posts_table, [{"title": title, "body": body} for title, body in POSTS]
    )


def downgrade() -> None:
    """Remove seeded users and posts."""
    op.execute("DELETE FROM posts WHERE title IN ('Post 1', 'Post 2')")
    op.execute("DELETE FROM users WHERE name IN ('John', 'Sally')")
