"""Typed fetch functions for the affiliates API."""

from __future__ import annotations

import logging

from pydantic import ValidationError

from wagerboard.api.client import AffiliatesAPIClient
from wagerboard.api.errors import UpstreamMalformed
from wagerboard.api.models import AffiliateRecord, AffiliatesResponse
from wagerboard.services.cycle import Cycle, format_ymd

log = logging.getLogger(__name__)

AFFILIATES_PATH = "/v1/external/affiliates"


async def fetch_records(client: AffiliatesAPIClient, cycle: Cycle) -> list[AffiliateRecord]:
    """Fetch affiliate wager totals for a cycle. One request, no retry.

    The API takes inclusive calendar dates, so the window's last
    millisecond maps to its last day.
    """
    params = {
        "start_at": format_ymd(cycle.start),
        "end_at": format_ymd(cycle.end),
    }
    data = await client.get(AFFILIATES_PATH, params=params)
    if not isinstance(data, dict):
        raise UpstreamMalformed("affiliates response is not a JSON object")
    try:
        parsed = AffiliatesResponse.model_validate(data)
    except ValidationError as exc:
        raise UpstreamMalformed(
            f"affiliates response failed validation ({exc.error_count()} errors)"
        ) from None
    log.debug(
        "Fetched %d affiliates for %s..%s",
        len(parsed.affiliates), params["start_at"], params["end_at"],
    )
    return parsed.affiliates
