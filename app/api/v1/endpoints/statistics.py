"""Statistics endpoints for dashboard data."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.deps import get_blog_statistics_service, get_db
from app.schemas.statistics import BlogStatisticsResponse
from app.services.blog_statistics import BlogStatisticsService

router = APIRouter(prefix="/blog/statistics", tags=["Blog Statistics"])


@router.get(
    "/dashboard",
    response_model=BlogStatisticsResponse,
    summary="Get Blog Dashboard Statistics",
    description="Counts and top lists for the blog overview. Either the full report is returned or the request fails."
)
async def get_dashboard_statistics(
    db: Session = Depends(get_db),
    stats_service: BlogStatisticsService = Depends(get_blog_statistics_service),
) -> BlogStatisticsResponse:
    """
    Get blog-wide statistics including:
    - Total posts (all, published, draft)
    - Total categories and tags
    - Total comments (all, approved, pending)
    - Distinct authors
    - Recent posts, most viewed published posts, recent comments
    """
    return await stats_service.get_dashboard_statistics(db)
