"""CRUD operations package - exports singleton instances for all models."""

from .base import CRUDBase
from .blog_post_tag import crud_blog_post_tag
from .blog_post import crud_blog_post
from .blog_category import crud_blog_category
from .blog_tag import crud_blog_tag
from .blog_comment import crud_blog_comment


__all__ = [
    # Base
    "CRUDBase",
    # CRUD instances
    "crud_blog_post",
    "crud_blog_post_tag",
    "crud_blog_category",
    "crud_blog_tag",
    "crud_blog_comment",
]
