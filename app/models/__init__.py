"""
SQLAlchemy Models for the blog module
"""

from ..database import Base
from .user import User
from .blog_category import BlogCategory
from .blog_tag import BlogTag
from .blog_post import BlogPost, PostStatus
from .blog_post_tag import BlogPostTag
from .blog_comment import BlogComment

# Export all models
__all__ = [
    "Base",
    "User",
    "BlogCategory",
    "BlogTag",
    "BlogPost",
    "PostStatus",
    "BlogPostTag",
    "BlogComment",
]
