"""
Base classes and interfaces for results parsers.

This module defines the contract that all results parsers must follow.
"""

from typing import Protocol

from leadwatch.models import ElectionResult


class ResultParser(Protocol):
    """
    Protocol for results parsers.

    Classes implementing this protocol fetch the latest tally from a results
    source and return it as an ElectionResult.
    """

    def fetch(self) -> ElectionResult:
        """Fetches and parses the latest results."""
