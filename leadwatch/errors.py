"""
Exceptions raised by the Lead Watch pipeline.

Every error is terminal for the run: the entry point logs it and exits
without sending a notification.
"""


class LeadWatchError(Exception):
    """Base class for all pipeline errors."""


class ConfigError(LeadWatchError):
    """The bot config file is missing, unreadable or incomplete."""


class FetchError(LeadWatchError):
    """The results source could not be fetched or decoded."""


class ParseError(LeadWatchError):
    """A numeric field in the results response is malformed."""


class StorageError(LeadWatchError):
    """The snapshot file could not be read or written."""


class NotifyError(LeadWatchError):
    """The Telegram message could not be delivered."""
