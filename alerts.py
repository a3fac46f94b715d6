import logging

import requests

from config import WEBHOOK_TIMEOUT, get_webhook_url

log = logging.getLogger(__name__)


def send_high_priority_alert(request_data: dict) -> bool:
    """
    POST a Slack-style message for a high-priority customer request.
    Returns True when the webhook accepted it.
    """
    url = get_webhook_url()
    if not url:
        log.warning("SLACK_WEBHOOK_URL not set, skipping alert")
        return False

    message = (
        f"*HIGH-PRIORITY REQUEST* [ID: {request_data['id']}]\n"
        f"• Keyword  : {request_data.get('matched_keyword') or '?'}\n"
        f"• Question : {request_data['question'][:300]}"
    )

    try:
        resp = requests.post(url, json={"text": message}, timeout=WEBHOOK_TIMEOUT)
        resp.raise_for_status()
        log.info("Slack webhook sent (status %s)", resp.status_code)
        return True
    except requests.RequestException as exc:
        log.error("Slack webhook failed: %s", exc)
        return False
