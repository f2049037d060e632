import logging

import requests

logger = logging.getLogger(__name__)

TIMEOUT = 30


def download(url: str) -> bytes:
    """Fetch url and return the response body; HTTP errors are raised."""
    logger.debug("downloading %s", url)
    resp = requests.get(url, timeout=TIMEOUT)
    resp.raise_for_status()
    return resp.content
