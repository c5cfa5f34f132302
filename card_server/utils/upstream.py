import requests

from card_server.config import get_cards_url
from server_logs.loggers import upstream_logger

UPSTREAM_FALLBACK_MESSAGE = "Failed to fetch data from Supercell API."


class UpstreamError(Exception):
    """The card catalog answered with a non-2xx status."""

    def __init__(self, status_code: int, reason: str):
        super().__init__(f"{status_code}: {reason}")
        self.status_code = status_code
        self.reason = reason


class MalformedPayloadError(ValueError):
    """A 2xx body that is not an object carrying an `items` list."""


def build_headers(api_key: str) -> dict:
    return {
        "Authorization": f"Bearer {api_key}",
        "Accept": "application/json",
    }


def extract_reason(response) -> str:
    """Best-effort `reason` from an upstream error body."""
    try:
        body = response.json()
    except ValueError:
        return UPSTREAM_FALLBACK_MESSAGE
    reason = body.get("reason") if isinstance(body, dict) else None
    if isinstance(reason, str) and reason:
        return reason
    return UPSTREAM_FALLBACK_MESSAGE


def fetch_card_items(api_key: str, url: str = None) -> list:
    """
    Fetch the full card list from the catalog in a single attempt.

    :param api_key: bearer credential for the catalog API
    :param url: override for the cards endpoint (defaults to config)
    :return: the upstream `items` list, unmodified
    :raises UpstreamError: on a non-2xx upstream status
    :raises MalformedPayloadError: when a 2xx body lacks an `items` list
    """
    url = url or get_cards_url()
    upstream_logger.info("upstream_request_sent", url=url)

    response = requests.get(url, headers=build_headers(api_key))

    if not response.ok:
        reason = extract_reason(response)
        upstream_logger.warning(
            "upstream_request_rejected",
            url=url,
            status=response.status_code,
            reason=reason
        )
        raise UpstreamError(response.status_code, reason)

    data = response.json()
    items = data.get("items") if isinstance(data, dict) else None
    if not isinstance(items, list):
        raise MalformedPayloadError("upstream card payload has no 'items' list")

    upstream_logger.info("upstream_request_succeeded", url=url, count=len(items))
    return items
