"""Service layer exports."""

from .blog_service import BlogService, blog_service
from .blog_statistics import BlogStatisticsService, blog_statistics_service

__all__ = [
    "BlogService",
    "blog_service",
    "BlogStatisticsService",
    "blog_statistics_service",
]
