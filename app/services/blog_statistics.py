"""Aggregation engine for the blog dashboard."""

import asyncio
import logging
from typing import Any, Callable, Dict

from sqlalchemy.orm import Session, sessionmaker

from app.config import settings
from app.crud import (
    crud_blog_category,
    crud_blog_comment,
    crud_blog_post,
    crud_blog_tag,
)
from app.models.blog_post import PostStatus
from app.schemas.blog_post import (
    BlogPostFilter,
    BlogPostSort,
    PaginationParams,
    PostSortField,
    SortDirection,
)
from app.schemas.statistics import BlogStatisticsResponse
from app.services.blog_service import BlogService, blog_service

logger = logging.getLogger(__name__)

Aggregate = Callable[[Session], Any]


class BlogStatisticsService:
    """
    Builds the dashboard report from independent sub-aggregates.

    Each sub-aggregate runs in a worker thread with its own session (SQLAlchemy
    sessions are not thread-safe) and returns plain values or schemas. If any
    of them fails, the whole report fails; there is no partial report.
    """

    def __init__(self, blog: BlogService, recent_limit: int = settings.DASHBOARD_RECENT_LIMIT):
        self.blog = blog
        self.recent_limit = recent_limit

    def _aggregates(self) -> Dict[str, Aggregate]:
        recent_page = PaginationParams(page=1, limit=self.recent_limit)
        return {
            "total_posts": lambda db: crud_blog_post.count_by_status(db),
            "published_posts": lambda db: crud_blog_post.count_by_status(db, status=PostStatus.PUBLISHED),
            "draft_posts": lambda db: crud_blog_post.count_by_status(db, status=PostStatus.DRAFT),
            "total_categories": lambda db: crud_blog_category.count(db),
            "total_tags": lambda db: crud_blog_tag.count(db),
            "total_comments": lambda db: crud_blog_comment.count_by_approval(db),
            "approved_comments": lambda db: crud_blog_comment.count_by_approval(db, is_approved=True),
            "pending_comments": lambda db: crud_blog_comment.count_by_approval(db, is_approved=False),
            "total_authors": lambda db: crud_blog_post.count_distinct_authors(db),
            "recent_posts": lambda db: self.blog.list_post_responses(
                db,
                sort=BlogPostSort(field=PostSortField.CREATED_AT, direction=SortDirection.DESC),
                pagination=recent_page,
            ),
            "popular_posts": lambda db: self.blog.list_post_responses(
                db,
                post_filter=BlogPostFilter(status=PostStatus.PUBLISHED),
                sort=BlogPostSort(field=PostSortField.VIEW_COUNT, direction=SortDirection.DESC),
                pagination=recent_page,
            ),
            "recent_comments": lambda db: self.blog.get_recent_comments(db, limit=self.recent_limit),
        }

    @staticmethod
    def _run(session_factory: sessionmaker, aggregate: Aggregate) -> Any:
        with session_factory() as session:
            return aggregate(session)

    async def get_dashboard_statistics(self, db: Session) -> BlogStatisticsResponse:
        """
        Compute the dashboard report concurrently.

        Args:
            db: Request session; only its engine is used, each sub-aggregate
                opens its own session on it.

        Raises:
            Exception: the first failure of any sub-aggregate
        """
        session_factory = sessionmaker(bind=db.get_bind(), autoflush=False)
        aggregates = self._aggregates()

        try:
            results = await asyncio.gather(
                *(asyncio.to_thread(self._run, session_factory, aggregate) for aggregate in aggregates.values())
            )
        except Exception:
            logger.exception("[STATS] Dashboard statistics failed")
            raise

        report = BlogStatisticsResponse(**dict(zip(aggregates.keys(), results)))
        logger.info(
            f"[STATS] Dashboard computed: {report.total_posts} posts, "
            f"{report.total_comments} comments, {report.total_authors} authors"
        )
        return report


# Singleton instance
blog_statistics_service = BlogStatisticsService(blog_service)
