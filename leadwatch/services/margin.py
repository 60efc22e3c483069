"""
Margin calculation.

Reduces a parsed results response to a Snapshot: the tracked candidate's
lead over the strongest other candidate, and the fraction of election
returns processed so far.
"""

import logging
import math
from typing import List

from leadwatch.errors import ParseError
from leadwatch.models import ContestResult, ElectionResult, Snapshot

logger = logging.getLogger(__name__)


def compute_lead(results: List[ContestResult], target: str) -> int:
    """Returns the target's vote count minus the best other candidate's.

    A target that never appears counts as 0 votes, so the lead is the
    negated best opponent count.
    """
    target_votes = 0
    best_opponent = 0
    seen_target = False

    for contest in results:
        for candidate in contest["candidates"]:
            if candidate["name"] == target:
                target_votes = candidate["vote_count"]
                seen_target = True
                continue
            if candidate["vote_count"] > best_opponent:
                best_opponent = candidate["vote_count"]

    if not seen_target:
        logger.warning(
            "Target candidate %r not found in results; lead reported against 0 votes.",
            target,
        )
    return target_votes - best_opponent


def parse_processed(value: str) -> float:
    """Parses a ``"count/total"`` string into a fraction."""
    parts = value.split("/")
    if len(parts) != 2:
        raise ParseError(f"Expected 'count/total', got {value!r}")

    try:
        count = float(parts[0])
        total = float(parts[1])
    except ValueError as e:
        raise ParseError(f"Non-numeric returns processed value {value!r}") from e

    if not (math.isfinite(count) and math.isfinite(total)):
        raise ParseError(f"Non-numeric returns processed value {value!r}")

    if total == 0:
        raise ParseError(f"Returns processed total is zero in {value!r}")
    return count / total


def build_snapshot(result: ElectionResult, target: str) -> Snapshot:
    """Builds the snapshot to persist for this run."""
    return Snapshot(
        lead=compute_lead(result["result"], target),
        processed=parse_processed(result["election_returns_processed"]),
    )
