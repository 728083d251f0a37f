from .user import AuthorSummary
from .blog_category import (
	BlogCategoryCreate,
	BlogCategoryUpdate,
	BlogCategorySummary,
	BlogCategoryResponse,
	BlogCategoryListResponse,
)
from .blog_tag import (
	BlogTagCreate,
	BlogTagUpdate,
	BlogTagSummary,
	BlogTagResponse,
	BlogTagListResponse,
)
from .blog_comment import (
	BlogCommentCreate,
	BlogCommentUpdate,
	BlogCommentResponse,
	BlogCommentListResponse,
	CommentPostSummary,
)
from .blog_post import (
	BlogPostCreate,
	BlogPostUpdate,
	BlogPostFilter,
	BlogPostSort,
	PaginationParams,
	PostSortField,
	SortDirection,
	BlogPostResponse,
	BlogPostListResponse,
	BlogPostViewResponse,
)
from .statistics import BlogStatisticsResponse

__all__ = [
	# Author
	"AuthorSummary",
	# Category
	"BlogCategoryCreate",
	"BlogCategoryUpdate",
	"BlogCategorySummary",
	"BlogCategoryResponse",
	"BlogCategoryListResponse",
	# Tag
	"BlogTagCreate",
	"BlogTagUpdate",
	"BlogTagSummary",
	"BlogTagResponse",
	"BlogTagListResponse",
	# Comment
	"BlogCommentCreate",
	"BlogCommentUpdate",
	"BlogCommentResponse",
	"BlogCommentListResponse",
	"CommentPostSummary",
	# Post
	"BlogPostCreate",
	"BlogPostUpdate",
	"BlogPostFilter",
	"BlogPostSort",
	"PaginationParams",
	"PostSortField",
	"SortDirection",
	"BlogPostResponse",
	"BlogPostListResponse",
	"BlogPostViewResponse",
	# Statistics
	"BlogStatisticsResponse",
]
