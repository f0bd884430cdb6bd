"""Shared test fixtures."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from wagerboard.api.models import AffiliateRecord
from wagerboard.config import Settings

EPOCH = datetime(2025, 8, 11, tzinfo=timezone.utc)
CYCLE = timedelta(days=14)


@pytest.fixture
def settings() -> Settings:
    return Settings(api_key="test_key", upstream_base_url="https://rainbet.test")


@pytest.fixture
def epoch() -> datetime:
    return EPOCH


@pytest.fixture
def sample_records() -> list[AffiliateRecord]:
    """Three affiliates in upstream (unsorted) order."""
    return [
        make_record("charlie_77", "80.4"),
        make_record("alice123", "100"),
        make_record("bob", "90.5"),
    ]


@pytest.fixture
def affiliates_payload() -> dict:
    """Raw upstream JSON body as the affiliates endpoint returns it."""
    return {
        "affiliates": [
            {"username": "alice123", "wagered_amount": "150.7", "id": 1},
            {"username": "bob", "wagered_amount": "200.2", "id": 2},
        ]
    }


def make_record(username: str, wagered: object) -> AffiliateRecord:
    return AffiliateRecord(username=username, wagered_amount=wagered)
