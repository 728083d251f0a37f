"""BlogPost model."""

from enum import Enum
from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, Index, CheckConstraint, Enum as SQLEnum
from sqlalchemy.orm import relationship
from ..database import Base, generate_uuid, utcnow


class PostStatus(str, Enum):
    """Blog post lifecycle states."""
    DRAFT = "draft"
    PUBLISHED = "published"
    ARCHIVED = "archived"


class BlogPost(Base):
    """Model for blog articles."""
    
    __tablename__ = "blog_posts"
    
    id = Column(String(36), primary_key=True, default=generate_uuid)
    
    # Foreign Keys
    author_id = Column(
        String(36),
        ForeignKey("users.id"),
        nullable=False,
        index=True
    )
    category_id = Column(
        String(36),
        ForeignKey("blog_categories.id", ondelete="SET NULL"),
        nullable=True,
        index=True
    )
    
    # Post Content
    title = Column(String(200), nullable=False)
    slug = Column(String(255), nullable=False, unique=True, index=True)
    content = Column(Text, nullable=False)
    excerpt = Column(String(500), nullable=True)
    featured_image = Column(String(500), nullable=True)
    status = Column(
        SQLEnum(
            PostStatus,
            name="post_status",
            values_callable=lambda enum_cls: [member.value for member in enum_cls],
        ),
        nullable=False,
        default=PostStatus.DRAFT,
        index=True
    )
    published_at = Column(DateTime, nullable=True)
    
    # Metadata
    view_count = Column(Integer, nullable=False, default=0, index=True)
    
    # Timestamps
    created_at = Column(DateTime, nullable=False, default=utcnow, index=True)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)
    
    # Constraints & Indexes
    __table_args__ = (
        CheckConstraint("view_count >= 0", name="check_blog_post_view_count"),
        # Dashboard "popular posts"
        Index('idx_blog_post_status_views', 'status', 'view_count'),
        Index('idx_blog_post_category_created', 'category_id', 'created_at'),
    )
    
    # Relationships
    author = relationship("User", back_populates="blog_posts")
    category = relationship("BlogCategory", back_populates="posts")
    tag_links = relationship(
        "BlogPostTag",
        back_populates="post",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    tags = relationship(
        "BlogTag",
        secondary="blog_post_tags",
        order_by="BlogTag.name",
        viewonly=True,
    )
    comments = relationship(
        "BlogComment",
        back_populates="post",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="BlogComment.created_at.desc()"
    )
