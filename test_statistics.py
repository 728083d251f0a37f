"""Tests for the dashboard aggregation engine."""

import asyncio
from datetime import datetime

import pytest

from app.crud import crud_blog_comment, crud_blog_tag
from app.models import PostStatus
from app.schemas import BlogCommentCreate
from app.services.blog_service import blog_service
from app.services.blog_statistics import BlogStatisticsService, blog_statistics_service


def _dashboard(db, service=blog_statistics_service):
    return asyncio.run(service.get_dashboard_statistics(db))


def test_empty_database_reports_zeros(db):
    report = _dashboard(db)

    assert report.total_posts == 0
    assert report.published_posts == 0
    assert report.draft_posts == 0
    assert report.total_categories == 0
    assert report.total_tags == 0
    assert report.total_comments == 0
    assert report.approved_comments == 0
    assert report.pending_comments == 0
    assert report.total_authors == 0
    assert report.recent_posts == []
    assert report.popular_posts == []
    assert report.recent_comments == []


@pytest.fixture
def populated(db, author, other_author, make_category, make_post, make_tag):
    tech = make_category("Tech")
    make_category("Life")
    python = make_tag("Python")

    posts = [
        make_post("Published one", status=PostStatus.PUBLISHED, category_id=tech.id, tag_ids=[python.id]),
        make_post("Published two", status=PostStatus.PUBLISHED, author_id=other_author.id),
        make_post("A draft", status=PostStatus.DRAFT),
        make_post("Archived", status=PostStatus.ARCHIVED),
    ]
    for day, (post, views) in enumerate(zip(posts, [5, 50, 500, 5000]), start=1):
        post.view_count = views
        post.created_at = datetime(2026, 3, day)
    db.commit()

    comments = []
    for hour, approved in enumerate([True, False, True]):
        comment = crud_blog_comment.create_comment(
            db,
            obj_in=BlogCommentCreate(
                content=f"Comment {hour}", post_id=posts[0].id, author_id=author.id, is_approved=approved
            ),
        )
        comment.created_at = datetime(2026, 3, 10, hour)
        comments.append(comment)
    db.commit()
    return {"posts": posts, "comments": comments, "author": author}


def test_populated_counts(db, populated):
    report = _dashboard(db)

    assert report.total_posts == 4
    assert report.published_posts == 2
    assert report.draft_posts == 1
    assert report.total_categories == 2
    assert report.total_tags == 1
    assert report.total_comments == 3
    assert report.approved_comments == 2
    assert report.pending_comments == 1
    assert report.total_authors == 2


def test_status_counts_never_exceed_total(db, populated):
    report = _dashboard(db)
    assert report.published_posts + report.draft_posts <= report.total_posts
    assert report.approved_comments + report.pending_comments == report.total_comments


def test_recent_posts_are_newest_first_in_any_status(db, populated):
    report = _dashboard(db)
    posts = populated["posts"]
    assert [p.id for p in report.recent_posts] == [p.id for p in reversed(posts)]


def test_popular_posts_are_published_only_by_views(db, populated):
    report = _dashboard(db)
    posts = populated["posts"]
    assert [p.id for p in report.popular_posts] == [posts[1].id, posts[0].id]
    assert all(p.status == PostStatus.PUBLISHED for p in report.popular_posts)


def test_popular_posts_are_enriched(db, populated):
    report = _dashboard(db)
    top_tagged = next(p for p in report.popular_posts if p.id == populated["posts"][0].id)
    assert top_tagged.category.slug == "tech"
    assert [tag.slug for tag in top_tagged.tags] == ["python"]
    assert top_tagged.author.name == "Ada Lovelace"
    assert top_tagged.comments_count == 2


def test_recent_comments_carry_author_and_post(db, populated):
    report = _dashboard(db)
    comments = populated["comments"]

    assert [c.id for c in report.recent_comments] == [c.id for c in reversed(comments)]
    first = report.recent_comments[0]
    assert first.author.email == "ada@example.com"
    assert first.post.slug == "published-one"


def test_recent_limit_bounds_the_lists(db, populated):
    service = BlogStatisticsService(blog_service, recent_limit=2)
    report = _dashboard(db, service)
    assert len(report.recent_posts) == 2
    assert len(report.recent_comments) == 2
    assert report.total_posts == 4


def test_any_failing_aggregate_fails_the_report(db, populated, monkeypatch):
    def broken_count(session):
        raise RuntimeError("tag table unavailable")

    monkeypatch.setattr(crud_blog_tag, "count", broken_count)

    with pytest.raises(RuntimeError, match="tag table unavailable"):
        _dashboard(db)
