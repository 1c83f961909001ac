"""Unit tests for VirtualPosts — defaults, flag overrides and result substitution."""

from datetime import datetime, timedelta, timezone

import pytest

from virtual_posts.application.schemas import PostSpec
from virtual_posts.application.services import VirtualPosts
from virtual_posts.domain.entities import Post, QueryState
from virtual_posts.domain.exceptions import (
    InvalidPostSpecError,
    InvalidQueryFlagError,
    UnknownQueryFlagError,
)


def _make_post(post_id: int) -> Post:
    now = datetime(2020, 1, 1, tzinfo=timezone.utc)
    return Post(
        id=post_id,
        post_date=now,
        post_date_gmt=now,
        post_modified=now,
        post_modified_gmt=now,
        guid=f"https://example.org/?p={post_id}",
        post_type="post",
    )


@pytest.fixture
def virtual(site, clock) -> VirtualPosts:
    return VirtualPosts(site=site, now=clock)


# ── Defaults ─────────────────────────────────────────────────────────


def test_hello_post_gets_defaults(site, clock):
    virtual = VirtualPosts([{"post_title": "Hello"}], site=site, now=clock)

    [post] = virtual.posts
    assert post.post_title == "Hello"
    assert post.post_type == "page"
    assert post.comment_status == "closed"
    assert post.ping_status == "closed"
    assert post.post_status == "publish"
    assert post.post_author == 0
    assert post.post_content == ""
    assert post.id
    assert post.guid


def test_post_date_defaults_to_site_local_now_without_microseconds(virtual, fixed_now):
    post = virtual.add_post({})

    assert post.post_date.utcoffset() == timedelta(hours=2)
    assert post.post_date.microsecond == 0
    assert post.post_date == fixed_now.replace(microsecond=0)
    assert post.post_date.hour == 14


def test_gmt_date_is_derived_from_post_date(virtual):
    post = virtual.add_post({"post_date": "2016-01-10 09:30:00"})

    assert post.post_date.hour == 9
    assert post.post_date.utcoffset() == timedelta(hours=1)
    assert post.post_date_gmt == datetime(2016, 1, 10, 8, 30, tzinfo=timezone.utc)
    assert post.post_date_gmt.tzinfo == timezone.utc


def test_modified_dates_default_to_creation_dates(virtual):
    post = virtual.add_post({"post_date": "2016-01-10 09:30:00"})

    assert post.post_modified == post.post_date
    assert post.post_modified_gmt == post.post_date_gmt


def test_modified_gmt_defaults_to_post_date_gmt_even_when_modified_is_given(virtual):
    post = virtual.add_post({
        "post_date": "2016-01-10 09:30:00",
        "post_modified": "2016-02-01 10:00:00",
    })

    assert post.post_modified.month == 2
    assert post.post_modified_gmt == post.post_date_gmt


def test_explicit_gmt_date_is_kept(virtual):
    post = virtual.add_post({
        "post_date": "2016-01-10 09:30:00",
        "post_date_gmt": "2016-01-10 07:00:00",
    })

    assert post.post_date_gmt == datetime(2016, 1, 10, 7, 0, tzinfo=timezone.utc)


def test_aware_post_date_is_converted_to_site_time(virtual):
    post = virtual.add_post({"post_date": "2016-01-10T09:30:00+05:00"})

    assert post.post_date.hour == 5
    assert post.post_date.minute == 30
    assert post.post_date.utcoffset() == timedelta(hours=1)
    assert post.post_date_gmt == datetime(2016, 1, 10, 4, 30, tzinfo=timezone.utc)


def test_aware_gmt_date_is_converted_to_utc(virtual):
    post = virtual.add_post({
        "post_date": "2016-01-10 09:30:00",
        "post_date_gmt": "2016-01-10T12:00:00+05:00",
    })

    assert post.post_date_gmt == datetime(2016, 1, 10, 7, 0, tzinfo=timezone.utc)
    assert post.post_date_gmt.utcoffset() == timedelta(0)


def test_id_defaults_to_time_plus_number_of_added_posts(virtual, fixed_now):
    first = virtual.add_post({})
    second = virtual.add_post({})
    third = virtual.add_post({})

    base = int(fixed_now.timestamp())
    assert [first.id, second.id, third.id] == [base, base + 1, base + 2]


def test_explicit_id_is_kept_and_accepts_upper_case_key(virtual):
    assert virtual.add_post({"ID": 42}).id == 42
    assert virtual.add_post({"id": 43}).id == 43


def test_clock_is_read_once_per_post(site, fixed_now):
    calls = []

    def ticking_clock():
        calls.append(None)
        return fixed_now + timedelta(seconds=len(calls))

    virtual = VirtualPosts(site=site, now=ticking_clock)
    first = virtual.add_post({})
    second = virtual.add_post({})

    assert len(calls) == 2
    assert first.id == int(first.post_date.timestamp())
    assert second.id == int(second.post_date.timestamp()) + 1


def test_none_counts_as_absent(virtual, fixed_now):
    post = virtual.add_post({"id": None, "post_type": None})

    assert post.id == int(fixed_now.timestamp())
    assert post.post_type == "page"


def test_guid_appends_post_name_to_home_url(virtual):
    assert virtual.add_post({"post_name": "hello"}).guid == "https://example.org/hello"
    assert virtual.add_post({"post_name": "/nested/"}).guid == "https://example.org/nested/"


def test_guid_is_home_url_when_post_name_is_empty(virtual):
    assert virtual.add_post({}).guid == "https://example.org"


def test_explicit_guid_is_kept(virtual):
    assert virtual.add_post({"guid": "urn:virtual:1"}).guid == "urn:virtual:1"


def test_posts_keep_input_order(site, clock):
    titles = ["one", "two", "three", "four"]
    virtual = VirtualPosts([{"post_title": t} for t in titles], site=site, now=clock)

    assert [p.post_title for p in virtual.posts] == titles
    assert len({p.id for p in virtual.posts}) == len(titles)


def test_add_post_accepts_spec_model(virtual):
    post = virtual.add_post(PostSpec(post_title="Typed", menu_order=3))

    assert post.post_title == "Typed"
    assert post.menu_order == 3


def test_unknown_post_field_is_rejected(virtual):
    with pytest.raises(InvalidPostSpecError) as exc_info:
        virtual.add_post({"post_titel": "typo"})

    assert exc_info.value.errors
    assert virtual.posts == []


def test_invalid_comment_status_is_rejected(virtual):
    with pytest.raises(InvalidPostSpecError):
        virtual.add_post({"comment_status": "maybe"})


@pytest.mark.parametrize("field", ["id", "ID", "post_author", "post_parent", "menu_order"])
def test_boolean_integer_field_is_rejected(virtual, field):
    with pytest.raises(InvalidPostSpecError):
        virtual.add_post({field: True})


def test_numeric_string_integer_field_is_rejected(virtual):
    with pytest.raises(InvalidPostSpecError):
        virtual.add_post({"post_author": "3"})


def test_negative_author_is_rejected(virtual):
    with pytest.raises(InvalidPostSpecError):
        virtual.add_post({"post_author": -1})


def test_negative_menu_order_is_accepted(virtual):
    assert virtual.add_post({"menu_order": -5}).menu_order == -5


# ── Query flags ──────────────────────────────────────────────────────


def test_constructor_flags_are_copied(site, clock):
    flags = {"is_page": True}
    virtual = VirtualPosts(query_flags=flags, site=site, now=clock)
    flags["is_404"] = True

    assert virtual.query_flags == {"is_page": True}


def test_added_flag_is_applied_by_callback(virtual):
    virtual.add_query_flag("is_404", False)
    virtual.add_query_flag("is_page", True)
    query = QueryState()
    query.set_flag("is_404", True)

    virtual.provide([], query)

    assert query.flags.is_404 is False
    assert query.flags.is_page is True


def test_fill_query_flags_overwrites_only_named_flags(virtual):
    virtual.add_query_flag("is_single", False)
    query = QueryState()
    query.set_flag("is_single", True)
    query.set_flag("is_singular", True)

    virtual.fill_query_flags(query)

    assert query.flags.is_single is False
    assert query.flags.is_singular is True


def test_unknown_flag_is_rejected(virtual):
    with pytest.raises(UnknownQueryFlagError):
        virtual.add_query_flag("is_virtual", True)


def test_non_boolean_flag_is_rejected(site):
    with pytest.raises(InvalidQueryFlagError):
        VirtualPosts(query_flags={"is_page": 1}, site=site)


# ── Result substitution ──────────────────────────────────────────────


def test_callback_returns_held_posts_regardless_of_input(site, clock):
    virtual = VirtualPosts([{"post_title": "A"}, {"post_title": "B"}], site=site, now=clock)
    queried = [_make_post(1), _make_post(2), _make_post(3)]

    result = virtual.provide(queried, QueryState())

    assert result is virtual.posts
    assert [p.post_title for p in result] == ["A", "B"]


def test_empty_instance_returns_empty_list_and_leaves_flags_alone(virtual):
    query = QueryState()
    query.set_flag("is_home", True)
    before = query.flags.to_dict()

    result = virtual.provide([_make_post(7)], query)

    assert result == []
    assert query.flags.to_dict() == before
