"""Create blog tables.

Adds users (author reference), blog_categories, blog_tags, blog_posts,
blog_post_tags and blog_comments.
"""

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "20261017_create_blog_tables"
down_revision = None
branch_labels = None
depends_on = None

post_status = sa.Enum("draft", "published", "archived", name="post_status")


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("image", sa.String(length=500), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "blog_categories",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("name", sa.String(length=100), nullable=False, unique=True),
        sa.Column("slug", sa.String(length=120), nullable=False, unique=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
    )
    op.create_index("ix_blog_categories_slug", "blog_categories", ["slug"])

    op.create_table(
        "blog_tags",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("name", sa.String(length=50), nullable=False, unique=True),
        sa.Column("slug", sa.String(length=60), nullable=False, unique=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
    )
    op.create_index("ix_blog_tags_slug", "blog_tags", ["slug"])

    op.create_table(
        "blog_posts",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("author_id", sa.String(length=36), sa.ForeignKey("users.id"), nullable=False),
        sa.Column(
            "category_id",
            sa.String(length=36),
            sa.ForeignKey("blog_categories.id", ondelete="SET NULL"),
            nullable=True,
        ),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("slug", sa.String(length=255), nullable=False, unique=True),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("excerpt", sa.String(length=500), nullable=True),
        sa.Column("featured_image", sa.String(length=500), nullable=True),
        sa.Column("status", post_status, nullable=False, server_default="draft"),
        sa.Column("published_at", sa.DateTime(), nullable=True),
        sa.Column("view_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.CheckConstraint("view_count >= 0", name="check_blog_post_view_count"),
    )
    op.create_index("ix_blog_posts_author_id", "blog_posts", ["author_id"])
    op.create_index("ix_blog_posts_category_id", "blog_posts", ["category_id"])
    op.create_index("ix_blog_posts_slug", "blog_posts", ["slug"])
    op.create_index("ix_blog_posts_status", "blog_posts", ["status"])
    op.create_index("ix_blog_posts_view_count", "blog_posts", ["view_count"])
    op.create_index("ix_blog_posts_created_at", "blog_posts", ["created_at"])
    op.create_index("idx_blog_post_status_views", "blog_posts", ["status", "view_count"])
    op.create_index("idx_blog_post_category_created", "blog_posts", ["category_id", "created_at"])

    op.create_table(
        "blog_post_tags",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column(
            "post_id",
            sa.String(length=36),
            sa.ForeignKey("blog_posts.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "tag_id",
            sa.String(length=36),
            sa.ForeignKey("blog_tags.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.UniqueConstraint("post_id", "tag_id", name="uq_blog_post_tag"),
    )
    op.create_index("ix_blog_post_tags_post_id", "blog_post_tags", ["post_id"])
    op.create_index("ix_blog_post_tags_tag_id", "blog_post_tags", ["tag_id"])
    op.create_index("idx_blog_post_tag_tag", "blog_post_tags", ["tag_id", "post_id"])

    op.create_table(
        "blog_comments",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column(
            "post_id",
            sa.String(length=36),
            sa.ForeignKey("blog_posts.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("author_id", sa.String(length=36), sa.ForeignKey("users.id"), nullable=False),
        sa.Column(
            "parent_id",
            sa.String(length=36),
            sa.ForeignKey("blog_comments.id", ondelete="CASCADE"),
            nullable=True,
        ),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("is_approved", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
    )
    op.create_index("ix_blog_comments_post_id", "blog_comments", ["post_id"])
    op.create_index("ix_blog_comments_author_id", "blog_comments", ["author_id"])
    op.create_index("ix_blog_comments_parent_id", "blog_comments", ["parent_id"])
    op.create_index("ix_blog_comments_is_approved", "blog_comments", ["is_approved"])
    op.create_index("ix_blog_comments_created_at", "blog_comments", ["created_at"])
    op.create_index("idx_blog_comment_post_approved", "blog_comments", ["post_id", "is_approved"])


def downgrade() -> None:
    op.drop_table("blog_comments")
    op.drop_table("blog_post_tags")
    op.drop_table("blog_posts")
    op.drop_table("blog_tags")
    op.drop_table("blog_categories")
    op.drop_table("users")
    post_status.drop(op.get_bind(), checkfirst=True)
