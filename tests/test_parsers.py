"""Unit tests for parsers."""

import unittest
from unittest.mock import MagicMock

import requests

from leadwatch.errors import FetchError
from leadwatch.parsers.gma import GMAResultParser


def _gma_body():
    return {
        "location_code": "0",
        "result": [
            {
                "contest": "PRESIDENT PHILIPPINES",
                "candidates": [
                    {"name": "MARCOS, BONGBONG (PFP)", "vote_count": 31104175, "party": "PFP"},
                    {"name": "ROBREDO, LENI (IND)", "vote_count": 14822051, "party": "IND"},
                ],
            }
        ],
        "election_returns_processed": "104000/106174",
        "total_voters_processed": "55000000",
        "result_as_of": "2022-05-11 08:00:00",
    }


class TestGMAResultParser(unittest.TestCase):
    def setUp(self):
        self.session = MagicMock()
        self.parser = GMAResultParser(
            "https://example.com/results.json",
            "https://www.gmanetwork.com/",
            session=self.session,
            timeout=5,
        )

    def test_fetch_sends_referer(self):
        self.session.get.return_value.json.return_value = _gma_body()

        self.parser.fetch()

        self.session.get.assert_called_once_with(
            "https://example.com/results.json",
            timeout=5,
            headers={"referer": "https://www.gmanetwork.com/"},
        )

    def test_fetch_parses_candidates(self):
        self.session.get.return_value.json.return_value = _gma_body()

        result = self.parser.fetch()

        self.assertEqual(len(result["result"]), 1)
        candidates = result["result"][0]["candidates"]
        self.assertEqual(candidates[1]["name"], "ROBREDO, LENI (IND)")
        self.assertEqual(candidates[1]["vote_count"], 14822051)
        self.assertEqual(candidates[1]["party"], "IND")
        self.assertEqual(result["election_returns_processed"], "104000/106174")
        self.assertEqual(result["result_as_of"], "2022-05-11 08:00:00")

    def test_network_error_raises_fetch_error(self):
        self.session.get.side_effect = requests.ConnectionError("boom")
        with self.assertRaises(FetchError):
            self.parser.fetch()

    def test_http_error_raises_fetch_error(self):
        self.session.get.return_value.raise_for_status.side_effect = requests.HTTPError("403")
        with self.assertRaises(FetchError):
            self.parser.fetch()

    def test_invalid_json_raises_fetch_error(self):
        self.session.get.return_value.json.side_effect = ValueError("Expecting value")
        with self.assertRaises(FetchError):
            self.parser.fetch()

    def test_missing_result_list(self):
        self.session.get.return_value.json.return_value = {"location_code": "0"}
        with self.assertRaises(FetchError):
            self.parser.fetch()

    def test_non_integer_vote_count(self):
        body = _gma_body()
        body["result"][0]["candidates"][0]["vote_count"] = "31,104,175"
        self.session.get.return_value.json.return_value = body
        with self.assertRaises(FetchError):
            self.parser.fetch()

    def test_missing_processed_field_is_left_for_margin(self):
        """The processed string is validated later by parse_processed."""
        body = _gma_body()
        del body["election_returns_processed"]
        self.session.get.return_value.json.return_value = body

        result = self.parser.fetch()
        self.assertEqual(result["election_returns_processed"], "")


if __name__ == "__main__":
    unittest.main()
