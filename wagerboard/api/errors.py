"""Errors raised at the upstream affiliates API boundary."""

from __future__ import annotations


class UpstreamError(Exception):
    """Base class for failures talking to the affiliates API."""


class UpstreamUnavailable(UpstreamError):
    """Network, timeout, or HTTP status failure reaching the API."""


class UpstreamMalformed(UpstreamError):
    """Response body is not the expected ``{"affiliates": [...]}`` shape."""
