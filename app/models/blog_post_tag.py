"""BlogPostTag association model (many-to-many post <-> tag)."""

from sqlalchemy import Column, String, DateTime, ForeignKey, UniqueConstraint, Index
from sqlalchemy.orm import relationship
from ..database import Base, generate_uuid, utcnow


class BlogPostTag(Base):
    """One row per (post, tag) pair."""
    
    __tablename__ = "blog_post_tags"
    
    id = Column(String(36), primary_key=True, default=generate_uuid)
    
    # Foreign Keys
    post_id = Column(
        String(36),
        ForeignKey("blog_posts.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    tag_id = Column(
        String(36),
        ForeignKey("blog_tags.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    
    # Timestamps
    created_at = Column(DateTime, nullable=False, default=utcnow)
    
    # Constraints
    __table_args__ = (
        UniqueConstraint('post_id', 'tag_id', name='uq_blog_post_tag'),
        Index('idx_blog_post_tag_tag', 'tag_id', 'post_id'),
    )
    
    # Relationships
    post = relationship("BlogPost", back_populates="tag_links")
    tag = relationship("BlogTag", back_populates="post_links")
