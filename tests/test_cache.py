"""Tests for LeaderboardCache."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from wagerboard.api.models import LeaderboardSnapshot, RankedEntry
from wagerboard.services.cache import LeaderboardCache


def _snapshot(*names: str) -> LeaderboardSnapshot:
    return LeaderboardSnapshot(
        entries=tuple(RankedEntry(username=n, wagered=1, weighted_wager=1) for n in names)
    )


def test_starts_empty():
    cache = LeaderboardCache()
    assert cache.read().entries == ()
    assert cache.read().as_json() == []


def test_replace_and_read():
    cache = LeaderboardCache()
    snap = _snapshot("a", "b")
    cache.replace(snap)
    assert cache.read() is snap
    assert [e.username for e in cache.entries] == ["a", "b"]


def test_replace_swaps_whole_snapshot():
    old = _snapshot("old")
    cache = LeaderboardCache(old)
    held = cache.read()
    cache.replace(_snapshot("new1", "new2"))
    # a reader holding the old snapshot still sees it intact
    assert held is old
    assert [e.username for e in held.entries] == ["old"]
    assert [e.username for e in cache.read().entries] == ["new1", "new2"]


def test_snapshot_cannot_be_mutated():
    snap = _snapshot("a")
    with pytest.raises(ValidationError):
        snap.entries = ()
    with pytest.raises(ValidationError):
        snap.entries[0].wagered = 99
    with pytest.raises(TypeError):
        snap.entries[0] = snap.entries[0]  # type: ignore[index]
