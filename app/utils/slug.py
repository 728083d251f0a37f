"""Slug generation for posts, categories and tags."""
import re

# Characters kept before hyphenation
_DISALLOWED = re.compile(r"[^a-z0-9\s-]")
_SEPARATORS = re.compile(r"[\s-]+")

SLUG_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


def slugify(text: str) -> str:
    """
    Derive a URL-safe slug from a display name.

    Deterministic: lowercases, drops everything outside ``[a-z0-9\\s-]``,
    turns each run of whitespace/hyphens into a single hyphen and trims
    hyphens from both ends. Uniqueness is not handled here; a duplicate
    slug is rejected by the unique constraint on the table.

    >>> slugify("Hello World!")
    'hello-world'
    """
    lowered = (text or "").lower()
    stripped = _DISALLOWED.sub("", lowered)
    return _SEPARATORS.sub("-", stripped).strip("-")


def is_valid_slug(value: str) -> bool:
    return bool(SLUG_PATTERN.match(value or ""))
