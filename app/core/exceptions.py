"""HTTP exceptions for the blog API."""

from fastapi import HTTPException, status


class BlogNotFoundException(HTTPException):
    """Base exception when a blog record does not exist. Status Code: 404."""

    def __init__(self, detail: str = "Resource not found"):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=detail,
        )


class BlogPostNotFoundException(BlogNotFoundException):
    def __init__(self, detail: str = "Blog post not found"):
        super().__init__(detail=detail)


class BlogCategoryNotFoundException(BlogNotFoundException):
    def __init__(self, detail: str = "Category not found"):
        super().__init__(detail=detail)


class BlogTagNotFoundException(BlogNotFoundException):
    def __init__(self, detail: str = "Tag not found"):
        super().__init__(detail=detail)


class BlogCommentNotFoundException(BlogNotFoundException):
    def __init__(self, detail: str = "Comment not found"):
        super().__init__(detail=detail)


class BlogConflictException(HTTPException):
    """
    Exception for referential-integrity and uniqueness violations.

    Raised when a request references a record that does not exist (e.g. an
    unknown tag id) or would duplicate a unique slug.

    Status Code: 409 Conflict

    Response Body:
        {
            "detail": "Tag not found: <id>"
        }
    """

    def __init__(self, detail: str = "Request conflicts with existing data"):
        super().__init__(
            status_code=status.HTTP_409_CONFLICT,
            detail=detail,
        )


class InvalidParentCommentException(HTTPException):
    """Exception when a reply points at a comment of another post. Status Code: 400."""

    def __init__(self, detail: str = "Parent comment not found or belongs to another post"):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=detail,
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
