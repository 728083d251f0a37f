"""BlogTag model."""

from sqlalchemy import Column, String, DateTime
from sqlalchemy.orm import relationship
from ..database import Base, generate_uuid, utcnow


class BlogTag(Base):
    __tablename__ = "blog_tags"
    
    id = Column(String(36), primary_key=True, default=generate_uuid)
    name = Column(String(50), nullable=False, unique=True)
    slug = Column(String(60), nullable=False, unique=True, index=True)
    
    # Timestamps
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)
    
    # Relationships
    post_links = relationship(
        "BlogPostTag",
        back_populates="tag",
        passive_deletes=True,
    )
