"""Shared fixtures for termls tests."""

import pytest

from termls.commands.models import Listing


@pytest.fixture
def make_listing():
    """Factory for Listings with sensible defaults."""
    def _make(name="file", permissions="-rw-r--r--", **overrides):
        fields = dict(
            permissions=permissions,
            hard_link_count="1",
            owner="alice",
            group="staff",
            size="0",
            mod_time_nanos=0,
            month="Jan",
            day="01",
            time_or_year="2020",
            name=name,
        )
        fields.update(overrides)
        return Listing(**fields)
    return _make
