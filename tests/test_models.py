"""Tests for API models."""

from __future__ import annotations

from wagerboard.api.models import AffiliateRecord, AffiliatesResponse, RankedEntry


class TestAffiliateRecord:
    def test_defaults(self):
        record = AffiliateRecord()
        assert record.username == ""
        assert record.wagered_amount is None

    def test_numeric_username_stringified(self):
        assert AffiliateRecord(username=12345).username == "12345"

    def test_amount_kept_raw(self):
        assert AffiliateRecord(wagered_amount=True).wagered_amount is True
        assert AffiliateRecord(wagered_amount={"v": 1}).wagered_amount == {"v": 1}

    def test_extra_fields_ignored(self):
        resp = AffiliatesResponse(
            affiliates=[{"username": "bob", "wagered_amount": "1.5", "rank": 3}]
        )
        assert resp.affiliates[0].username == "bob"
        assert resp.affiliates[0].wagered_amount == "1.5"


class TestRankedEntry:
    def test_serializes_with_camel_case_weighted_wager(self):
        entry = RankedEntry(username="bob", wagered=200, weighted_wager=200)
        assert entry.model_dump(by_alias=True) == {
            "username": "bob",
            "wagered": 200,
            "weightedWager": 200,
        }

    def test_accepts_alias(self):
        entry = RankedEntry(username="bob", wagered=1, weightedWager=2)
        assert entry.weighted_wager == 2
