"""
Data models for the Lead Watch application.
"""

from typing import List, Optional, TypedDict


class Candidate(TypedDict):
    """A single candidate tally as reported by the results source."""

    name: str
    vote_count: int
    party: str


class ContestResult(TypedDict):
    """Candidate tallies for one contest."""

    contest: str
    candidates: List[Candidate]


class ElectionResult(TypedDict):
    """Type definition for a parsed results response."""

    location_code: str
    result: List[ContestResult]
    election_returns_processed: str  # "count/total"
    total_voters_processed: Optional[str]
    result_as_of: Optional[str]


class Snapshot(TypedDict):
    """Lead and processed fraction persisted between runs."""

    lead: int
    processed: float


class BotConfig(TypedDict):
    """Telegram credentials loaded from the config file."""

    bot_id: str
    recipient: str
