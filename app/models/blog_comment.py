"""BlogComment model for comments on blog posts."""

from sqlalchemy import Column, String, Text, DateTime, ForeignKey, Index, Boolean
from sqlalchemy.orm import backref, relationship
from ..database import Base, generate_uuid, utcnow


class BlogComment(Base):
    """Model for comments on a blog post."""
    
    __tablename__ = "blog_comments"
    
    id = Column(String(36), primary_key=True, default=generate_uuid)
    
    # Foreign Keys
    post_id = Column(
        String(36),
        ForeignKey("blog_posts.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    author_id = Column(
        String(36),
        ForeignKey("users.id"),
        nullable=False,
        index=True
    )
    parent_id = Column(
        String(36),
        ForeignKey("blog_comments.id", ondelete="CASCADE"),
        nullable=True,
        index=True
    )  # Threaded replies, any depth
    
    # Comment Content
    content = Column(Text, nullable=False)
    is_approved = Column(Boolean, nullable=False, default=False, index=True)
    
    # Timestamps
    created_at = Column(DateTime, nullable=False, default=utcnow, index=True)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)
    
    # Constraints & Indexes
    __table_args__ = (
        Index('idx_blog_comment_post_approved', 'post_id', 'is_approved'),
    )
    
    # Relationships
    post = relationship("BlogPost", back_populates="comments")
    author = relationship("User", foreign_keys=[author_id])
    parent = relationship(
        "BlogComment",
        remote_side=[id],
        backref=backref("replies", passive_deletes=True),
    )
