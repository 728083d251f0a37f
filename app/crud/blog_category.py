"""CRUD operations for BlogCategory."""

import logging
from typing import List, Tuple

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from app.crud.base import CRUDBase
from app.models.blog_category import BlogCategory
from app.models.blog_post import BlogPost
from app.schemas.blog_category import BlogCategoryCreate, BlogCategoryUpdate
from app.utils.slug import slugify

logger = logging.getLogger(__name__)


class CRUDBlogCategory(CRUDBase[BlogCategory, BlogCategoryCreate, BlogCategoryUpdate]):
    """CRUD operations for BlogCategory."""
    
    def get_all_with_post_counts(self, db: Session) -> List[Tuple[BlogCategory, int]]:
        """Get all categories, each paired with its number of posts."""
        stmt = (
            select(BlogCategory, func.count(BlogPost.id))
            .outerjoin(BlogPost, BlogPost.category_id == BlogCategory.id)
            .group_by(BlogCategory.id)
            .order_by(BlogCategory.name)
        )
        return [(category, count) for category, count in db.execute(stmt).all()]

    def get_post_count(self, db: Session, *, category_id: str) -> int:
        stmt = select(func.count(BlogPost.id)).where(BlogPost.category_id == category_id)
        return db.scalar(stmt) or 0
    
    def create_category(self, db: Session, *, obj_in: BlogCategoryCreate) -> BlogCategory:
        """Create a category; its slug comes from the name."""
        category = self.create(db, obj_in={**obj_in.model_dump(), "slug": slugify(obj_in.name)})
        logger.info(f"[BLOG] Created category {category.id} ({category.slug})")
        return category

    def update_category(
        self,
        db: Session,
        *,
        db_obj: BlogCategory,
        obj_in: BlogCategoryUpdate
    ) -> BlogCategory:
        """Update a category. Renaming regenerates the slug."""
        update_data = obj_in.model_dump(exclude_unset=True)
        if "name" in update_data:
            update_data["slug"] = slugify(update_data["name"])
        return self.update(db, db_obj=db_obj, obj_in=update_data)


# Singleton instance
crud_blog_category = CRUDBlogCategory(BlogCategory)
