import time

import pytest

from pokedexcli.cache import Cache


@pytest.mark.parametrize(
    ("key", "value"),
    [
        ("https://example.com", b"testdata"),
        ("https://example.com/path", b"moretestdata"),
    ],
)
def test_add_get(key, value):
    with Cache(5.0) as cache:
        cache.add(key, value)
        assert cache.get(key) == value


def test_reap_loop():
    base = 0.005
    with Cache(base) as cache:
        cache.add("https://example.com", b"testdata")
        assert cache.get("https://example.com") == b"testdata"
        deadline = time.time() + 2.0
        while cache.get("https://example.com") is not None and time.time() < deadline:
            time.sleep(base + 0.005)
        assert cache.get("https://example.com") is None


def test_get_missing_key():
    with Cache(60.0) as cache:
        assert cache.get("missing") is None
        assert "missing" not in cache


def test_add_replaces_value():
    with Cache(60.0) as cache:
        cache.add("k", b"one")
        cache.add("k", b"two")
        assert cache.get("k") == b"two"
        assert len(cache) == 1


def test_reap_removes_only_old_entries():
    with Cache(60.0) as cache:
        cache.add("k", b"v")
        cache.reap(time.time(), 60.0)
        assert cache.get("k") == b"v"
        cache.reap(time.time() + 120.0, 60.0)
        assert cache.get("k") is None
        assert len(cache) == 0


def test_non_positive_interval_rejected():
    with pytest.raises(ValueError):
        Cache(0)


def test_close_stops_reaper():
    cache = Cache(0.005)
    cache.add("k", b"v")
    cache.close()
    time.sleep(0.05)
    assert cache.get("k") == b"v"