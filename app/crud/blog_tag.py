"""CRUD operations for BlogTag."""

import logging
from typing import List, Tuple

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from app.crud.base import CRUDBase
from app.models.blog_post_tag import BlogPostTag
from app.models.blog_tag import BlogTag
from app.schemas.blog_tag import BlogTagCreate, BlogTagUpdate
from app.utils.slug import slugify

logger = logging.getLogger(__name__)


class CRUDBlogTag(CRUDBase[BlogTag, BlogTagCreate, BlogTagUpdate]):
    
    def get_all_with_post_counts(self, db: Session) -> List[Tuple[BlogTag, int]]:
        stmt = (
            select(BlogTag, func.count(BlogPostTag.id))
            .outerjoin(BlogPostTag, BlogPostTag.tag_id == BlogTag.id)
            .group_by(BlogTag.id)
            .order_by(BlogTag.name)
        )
        return [(tag, count) for tag, count in db.execute(stmt).all()]

    def get_post_count(self, db: Session, *, tag_id: str) -> int:
        stmt = select(func.count(BlogPostTag.id)).where(BlogPostTag.tag_id == tag_id)
        return db.scalar(stmt) or 0

    def create_tag(self, db: Session, *, obj_in: BlogTagCreate) -> BlogTag:
        tag = self.create(db, obj_in={"name": obj_in.name, "slug": slugify(obj_in.name)})
        logger.info(f"[BLOG] Created tag {tag.id} ({tag.slug})")
        return tag

    def update_tag(self, db: Session, *, db_obj: BlogTag, obj_in: BlogTagUpdate) -> BlogTag:
        update_data = obj_in.model_dump(exclude_unset=True)
        if "name" in update_data:
            update_data["slug"] = slugify(update_data["name"])
        return self.update(db, db_obj=db_obj, obj_in=update_data)


# Singleton instance
crud_blog_tag = CRUDBlogTag(BlogTag)
