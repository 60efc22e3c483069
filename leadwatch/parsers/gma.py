"""
GMA Network results parser.

This module provides the GMAResultParser class for fetching the national
tally published by GMA Network's election results feed.
"""

import logging
from typing import Any, Dict, List, Optional

import requests

from leadwatch.errors import FetchError
from leadwatch.models import Candidate, ContestResult, ElectionResult
from leadwatch.parsers.base import ResultParser

logger = logging.getLogger(__name__)


class GMAResultParser(ResultParser):
    """Parses the GMA ``PRESIDENT_PHILIPPINES.json`` feed."""

    def __init__(
        self,
        url: str,
        referer: str,
        session: Optional[requests.Session] = None,
        timeout: float = 10,
    ):
        self.url = url
        self.referer = referer
        self.session = session or requests.Session()
        self.timeout = timeout

    def fetch(self) -> ElectionResult:
        """Fetches the feed and parses it into an ElectionResult."""
        # The feed rejects requests that do not come from gmanetwork.com
        try:
            resp = self.session.get(
                self.url, timeout=self.timeout, headers={"referer": self.referer}
            )
            resp.raise_for_status()
        except requests.RequestException as req_err:
            raise FetchError(f"Network error fetching {self.url}: {req_err}") from req_err

        try:
            body = resp.json()
        except ValueError as e:
            raise FetchError(f"Response from {self.url} is not valid JSON: {e}") from e

        result = self._parse_body(body)
        logger.info(
            "Fetched %d contest(s), returns processed %s (as of %s).",
            len(result["result"]),
            result["election_returns_processed"],
            result["result_as_of"],
        )
        return result

    def _parse_body(self, body: Any) -> ElectionResult:
        if not isinstance(body, dict):
            raise FetchError("Results response must be a JSON object")

        raw_contests = body.get("result")
        if not isinstance(raw_contests, list):
            raise FetchError("Results response has no 'result' list")

        return ElectionResult(
            location_code=str(body.get("location_code", "")),
            result=[self._parse_contest(c) for c in raw_contests],
            election_returns_processed=str(body.get("election_returns_processed", "")),
            total_voters_processed=body.get("total_voters_processed"),
            result_as_of=body.get("result_as_of"),
        )

    def _parse_contest(self, raw: Any) -> ContestResult:
        if not isinstance(raw, dict):
            raise FetchError(f"Malformed contest entry: {raw!r}")
        raw_candidates = raw.get("candidates", [])
        if not isinstance(raw_candidates, list):
            raise FetchError(f"Malformed candidates list in contest {raw.get('contest')!r}")

        candidates: List[Candidate] = [self._parse_candidate(c) for c in raw_candidates]
        return ContestResult(contest=str(raw.get("contest", "")), candidates=candidates)

    def _parse_candidate(self, raw: Any) -> Candidate:
        if not isinstance(raw, dict):
            raise FetchError(f"Malformed candidate entry: {raw!r}")
        entry: Dict[str, Any] = raw
        name = entry.get("name")
        vote_count = entry.get("vote_count")
        if not isinstance(name, str):
            raise FetchError(f"Candidate entry without a name: {entry!r}")
        # bool is an int subclass, reject it explicitly
        if isinstance(vote_count, bool) or not isinstance(vote_count, int):
            raise FetchError(f"Candidate {name!r} has a non-integer vote_count: {vote_count!r}")
        return Candidate(name=name, vote_count=vote_count, party=str(entry.get("party", "")))
