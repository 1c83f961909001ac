"""Unit tests for the VirtualPageRegistry."""

import pytest

from virtual_posts.application.services import VirtualPageRegistry, VirtualPosts
from virtual_posts.domain.entities import QueryState, QueryVars
from virtual_posts.domain.exceptions import DuplicateEntityError, EntityNotFoundError


@pytest.fixture
def registry(site, clock) -> VirtualPageRegistry:
    registry = VirtualPageRegistry()
    registry.register(
        "about",
        VirtualPosts([{"post_title": "About", "post_name": "about"}], {"is_page": True}, site=site, now=clock),
    )
    return registry


def test_register_and_get(registry):
    assert "about" in registry
    assert len(registry) == 1
    assert registry.slugs == ["about"]
    assert registry.get("about").posts[0].post_title == "About"


def test_duplicate_slug_is_rejected(registry, site):
    with pytest.raises(DuplicateEntityError):
        registry.register("about", VirtualPosts(site=site))


def test_get_unknown_slug(registry):
    with pytest.raises(EntityNotFoundError):
        registry.get("contact")


def test_matching_name_substitutes_page_posts(registry):
    query = QueryState(query_vars=QueryVars(name="about"))

    result = registry.provide([], query)

    assert [p.post_name for p in result] == ["about"]
    assert query.flags.is_page is True


def test_other_names_pass_through(registry):
    query = QueryState(query_vars=QueryVars(name="contact"))
    original: list = []

    result = registry.provide(original, query)

    assert result is original
    assert query.flags.is_page is False


def test_listing_queries_pass_through(registry):
    query = QueryState()
    original: list = []

    assert registry.provide(original, query) is original
