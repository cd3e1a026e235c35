import os
from concurrent.futures import Future, ThreadPoolExecutor

import httpx

from utils import logging

TELEGRAM_API_URL = "https://api.telegram.org/bot{token}/sendMessage"
TELEGRAM_TIMEOUT_SECONDS = 5.0

_executor = ThreadPoolExecutor(max_workers=2, thread_name_prefix="telegram")


def send_telegram_notification(message: str) -> None:
    """Best effort: every failure is logged and swallowed."""
    bot_token = os.getenv("TELEGRAM_BOT_TOKEN")
    chat_id = os.getenv("TELEGRAM_CHAT_ID")

    if not bot_token or not chat_id:
        logging.warning("TELEGRAM_BOT_TOKEN or TELEGRAM_CHAT_ID not set")
        return

    try:
        response = httpx.post(
            TELEGRAM_API_URL.format(token=bot_token),
            data={"chat_id": chat_id, "text": message},
            timeout=TELEGRAM_TIMEOUT_SECONDS,
        )
    except httpx.HTTPError as e:
        logging.warning(f"Error sending telegram notification: {str(e)}")
        return

    if response.status_code != 200:
        logging.warning(f"Telegram API returned non-200 status code: {response.status_code}")


def _log_failure(future: Future):
    error = future.exception()
    if error is not None:
        logging.error(f"Telegram notification failed: {str(error)}")


def notify_in_background(message: str) -> Future:
    """Fire and forget; the returned future is never awaited on the request path."""
    future = _executor.submit(send_telegram_notification, message)
    future.add_done_callback(_log_failure)
    return future
