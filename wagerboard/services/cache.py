"""In-memory holder for the current cycle's leaderboard snapshot."""

from __future__ import annotations

from wagerboard.api.models import LeaderboardSnapshot, RankedEntry


class LeaderboardCache:
    """Holds one immutable snapshot, swapped whole on each refresh.

    Snapshots are frozen, so readers can keep a reference while a refresh
    replaces it. Rebinding the attribute is atomic on the event loop.
    """

    def __init__(self, snapshot: LeaderboardSnapshot | None = None) -> None:
        self._snapshot = snapshot or LeaderboardSnapshot()

    def read(self) -> LeaderboardSnapshot:
        return self._snapshot

    def replace(self, snapshot: LeaderboardSnapshot) -> None:
        self._snapshot = snapshot

    @property
    def entries(self) -> tuple[RankedEntry, ...]:
        return self._snapshot.entries
