"""
Change detection and message formatting.

Compares the previous and current snapshots and renders the Markdown
message sent to Telegram.
"""

import logging
import math

from leadwatch.models import Snapshot

logger = logging.getLogger(__name__)

# Telegram legacy Markdown: backticks render as code, asterisks as bold
NEGATIVE_MARKUP = "`"
POSITIVE_MARKUP = "*"


def has_changed(old: Snapshot, new: Snapshot) -> bool:
    """Returns True unless the processed fractions are exactly equal."""
    return old["processed"] != new["processed"]


def lead_delta_pct(old_lead: int, new_lead: int) -> float:
    """Change of the lead relative to the current lead, in percent.

    A current lead of zero yields +inf or -inf by the sign of the change,
    and nan when the lead was already zero.
    """
    change = old_lead - new_lead
    if new_lead == 0:
        if change == 0:
            return math.nan
        return math.copysign(math.inf, change)
    return change * 100 / new_lead


def markup_for(delta: float) -> str:
    """Picks the wrapper for the lead line; zero and nan get none."""
    if delta < 0:
        return NEGATIVE_MARKUP
    if delta > 0:
        return POSITIVE_MARKUP
    return ""


def format_message(old: Snapshot, new: Snapshot) -> str:
    """Renders the three-line update message."""
    delta = lead_delta_pct(old["lead"], new["lead"])
    if not math.isfinite(delta):
        logger.warning("Current lead is zero; lead change reported as %s.", delta)
    logger.info("Lead change: %.2f%%", delta)

    modifier = markup_for(delta)
    reported = new["processed"] * 100
    lead = f"{modifier}{new['lead']:,} ({delta:,.2f}%){modifier}"
    return (
        f"Lead: {lead}\n"
        f"Processed: {reported:.2f}%\n"
        f"Remaining: {100 - reported:.2f}%"
    )
