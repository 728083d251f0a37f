from sqlalchemy import Column, String, DateTime
from sqlalchemy.orm import relationship
from ..database import Base, generate_uuid, utcnow


class User(Base):
    """Dashboard user. Owned by the surrounding admin system; the blog only reads it."""

    __tablename__ = "users"
    
    # Primary Key
    id = Column(String(36), primary_key=True, default=generate_uuid)
    
    # Profile
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    image = Column(String(500))
    
    # Timestamps
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)
    
    # Relationships
    blog_posts = relationship("BlogPost", back_populates="author", passive_deletes=True)
