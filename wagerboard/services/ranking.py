"""Rank raw affiliate records into a masked top-N leaderboard."""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Iterable
from typing import Any

from wagerboard.api.models import AffiliateRecord, RankedEntry

log = logging.getLogger(__name__)

MASK = "***"
DEFAULT_LIMIT = 10


def mask_identifier(username: str | None) -> str:
    """Keep only the first and last two characters of names longer than 4.

    Length and slicing count code points, so an emoji is one character
    and is never split in half.
    """
    if not username:
        return ""
    if len(username) <= 4:
        return username
    return username[:2] + MASK + username[-2:]


def parse_amount(value: Any) -> float:
    """Parse a wagered amount. Anything unparseable or non-finite counts as 0.

    Booleans, objects, arrays and integers too large for a float all count
    as unparseable.
    """
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        amount = float(value)
    except (TypeError, ValueError, OverflowError):
        log.debug("Unparseable wagered amount %r, treating as 0", value)
        return 0.0
    if not math.isfinite(amount):
        return 0.0
    return amount


def round_half_up(amount: float) -> int:
    """Round to the nearest integer, halves toward +infinity (not banker's)."""
    return math.floor(amount + 0.5)


def default_weight(amount: float) -> int:
    """Weighted wager currently equals the rounded wager."""
    return round_half_up(amount)


def rank(
    records: Iterable[AffiliateRecord],
    limit: int = DEFAULT_LIMIT,
    weigher: Callable[[float], int] = default_weight,
) -> list[RankedEntry]:
    """Sort by wagered amount, keep the top ``limit``, and mask names.

    The sort is stable: equal amounts keep upstream order. The #1 and #2
    rows are then swapped whenever at least two rows remain. That swap is
    a product requirement of the leaderboard display.
    """
    parsed = [(record, parse_amount(record.wagered_amount)) for record in records]
    top = sorted(parsed, key=lambda pair: pair[1], reverse=True)[:max(limit, 0)]
    if len(top) >= 2:
        top[0], top[1] = top[1], top[0]

    return [
        RankedEntry(
            username=mask_identifier(record.username),
            wagered=round_half_up(amount),
            weighted_wager=weigher(amount),
        )
        for record, amount in top
    ]
