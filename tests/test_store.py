"""Tests for ContentStore."""

import pytest

from qwsvg.engine.store import ContentStore
from qwsvg.exceptions import LocationError


def test_store_starts_empty():
    store = ContentStore()
    assert store.head == []
    assert store.body == []
    assert store.is_empty
    assert store.balanced


def test_append_keeps_order_per_location():
    store = ContentStore()
    store.append("body", "a")
    store.append("head", "h")
    store.append("body", "b")
    assert store.head == ["h"]
    assert store.body == ["a", "b"]


def test_reset_clears_in_place():
    store = ContentStore()
    body = store.body
    store.append("body", "a")
    store.open_tags.append("g")

    store.reset()

    assert store.body is body
    assert store.is_empty
    assert store.balanced


def test_unknown_location_raises():
    store = ContentStore()
    with pytest.raises(LocationError, match="footer"):
        store.append("footer", "x")
