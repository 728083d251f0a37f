"""Tests for slug generation."""

import pytest

from app.utils.slug import is_valid_slug, slugify


@pytest.mark.parametrize(
    "text,expected",
    [
        ("Hello World!", "hello-world"),
        ("Tech", "tech"),
        ("  Leading and trailing  ", "leading-and-trailing"),
        ("Python 3.12 Release Notes", "python-312-release-notes"),
        ("a - b", "a-b"),
        ("--already-slugged--", "already-slugged"),
        ("Tabs\tand\nnewlines", "tabs-and-newlines"),
        ("Café au lait", "caf-au-lait"),
        ("!!!", ""),
        ("", ""),
    ],
)
def test_slugify_examples(text, expected):
    assert slugify(text) == expected


SAMPLE_TITLES = [
    "Hello World!",
    "  What's new in FastAPI?  ",
    "C'est la vie -- 2026 edition",
    "Multiple     spaces   here",
    "UPPER lower MiXeD",
    "emoji 🚀 launch",
    "trailing hyphen -",
    "snake_case_title",
]


@pytest.mark.parametrize("title", SAMPLE_TITLES)
def test_slugify_properties(title):
    slug = slugify(title)

    assert slugify(slug) == slug
    assert set(slug) <= set("abcdefghijklmnopqrstuvwxyz0123456789-")
    assert not slug.startswith("-")
    assert not slug.endswith("-")
    assert "--" not in slug
    assert is_valid_slug(slug)


def test_slugify_is_deterministic():
    assert slugify("Same Input") == slugify("Same Input")


def test_slugify_spaces_become_hyphens_when_read_back_as_title():
    slug = slugify("Hello World!")
    assert slugify(slug.replace("-", " ")) == slug


def test_is_valid_slug_rejects_bad_values():
    assert not is_valid_slug("")
    assert not is_valid_slug("Hello")
    assert not is_valid_slug("a--b")
    assert not is_valid_slug("-a")
