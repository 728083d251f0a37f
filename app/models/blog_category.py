"""BlogCategory model for grouping blog posts."""

from sqlalchemy import Column, String, Text, DateTime
from sqlalchemy.orm import relationship
from ..database import Base, generate_uuid, utcnow


class BlogCategory(Base):
    """Model for blog categories."""
    
    __tablename__ = "blog_categories"
    
    id = Column(String(36), primary_key=True, default=generate_uuid)
    name = Column(String(100), nullable=False, unique=True)
    slug = Column(String(120), nullable=False, unique=True, index=True)
    description = Column(Text, nullable=True)
    
    # Timestamps
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)
    
    # Relationships
    # Posts keep living when their category goes away (ON DELETE SET NULL)
    posts = relationship("BlogPost", back_populates="category", passive_deletes=True)
