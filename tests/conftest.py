"""Shared fixtures — a fixed clock and a site context."""

from datetime import datetime, timezone
from zoneinfo import ZoneInfo

import pytest

from virtual_posts.domain.entities import SiteContext

FIXED_NOW = datetime(2016, 5, 4, 12, 0, 30, 123456, tzinfo=timezone.utc)


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def clock():
    return lambda: FIXED_NOW


@pytest.fixture
def site() -> SiteContext:
    return SiteContext(home_url="https://example.org/", timezone=ZoneInfo("Europe/Belgrade"))
