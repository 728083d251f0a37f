"""Core module exports."""

from .exceptions import (
    BlogNotFoundException,
    BlogPostNotFoundException,
    BlogCategoryNotFoundException,
    BlogTagNotFoundException,
    BlogCommentNotFoundException,
    BlogConflictException,
    InvalidParentCommentException,
)

__all__ = [
    "BlogNotFoundException",
    "BlogPostNotFoundException",
    "BlogCategoryNotFoundException",
    "BlogTagNotFoundException",
    "BlogCommentNotFoundException",
    "BlogConflictException",
    "InvalidParentCommentException",
]
