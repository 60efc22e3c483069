"""
Telegram service module for delivering lead updates.

This module provides the TelegramService class which posts Markdown
messages through the Telegram Bot API.
"""

import logging
from typing import Any, Dict, Optional

import requests

from leadwatch.errors import NotifyError

logger = logging.getLogger(__name__)


class TelegramService:
    """Service for sending messages through a Telegram bot."""

    def __init__(
        self,
        bot_token: str,
        api_url: str = "https://api.telegram.org",
        session: Optional[requests.Session] = None,
        timeout: float = 10,
    ):
        self.bot_token = bot_token
        self.api_url = api_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def _build_payload(self, chat_id: str, text: str) -> Dict[str, Any]:
        """Builds the sendMessage request body."""
        return {
            "chat_id": chat_id,
            "text": text,
            "parse_mode": "markdown",
            "disable_web_page_preview": True,
        }

    def send_message(self, chat_id: str, text: str) -> None:
        """Posts a message to the given chat."""
        url = f"{self.api_url}/bot{self.bot_token}/sendMessage"
        try:
            resp = self.session.post(
                url,
                json=self._build_payload(chat_id, text),
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
            resp.raise_for_status()
        except requests.RequestException as req_err:
            # Keep the token out of the error text
            raise NotifyError(
                f"Telegram sendMessage to {chat_id} failed: "
                f"{str(req_err).replace(self.bot_token, '***')}"
            ) from req_err
        logger.info("Message sent to %s.", chat_id)
