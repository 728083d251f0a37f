"""API v1 router aggregator."""

from fastapi import APIRouter

from app.api.v1.endpoints import blog_posts, blog_categories, blog_tags, blog_comments, statistics

api_router = APIRouter(prefix="/api/v1")

api_router.include_router(blog_posts.router)
api_router.include_router(blog_categories.router)
api_router.include_router(blog_tags.router)
api_router.include_router(blog_comments.router)
api_router.include_router(statistics.router)

__all__ = ["api_router"]
