import logging

import requests

from vatsim.config import settings
from vatsim.errors import FetchFailed, MalformedResponse

logger = logging.getLogger(__name__)


def get(url, params=None):
    """Issue one GET with the configured headers and timeout. No retries."""
    logger.debug("GET %s params=%s", url, params)
    return requests.get(url, params=params, headers=settings.headers, timeout=settings.timeout)


def get_checked(url, params=None):
    response = get(url, params=params)
    if response.status_code >= 400:
        logger.warning("GET %s returned %s", url, response.status_code)
        raise FetchFailed(response.status_code, url=url)
    return response


def decode(response, build):
    """Decode a JSON body and hand it to ``build``.

    Anything that goes wrong on the way (not JSON, wrong shape, missing
    key) is reported as ``MalformedResponse`` chained to the original error.
    """
    try:
        payload = response.json()
    except ValueError as e:
        raise MalformedResponse(f"Response from {response.url} is not JSON: {e}") from e
    try:
        return build(payload)
    except (KeyError, TypeError, ValueError) as e:
        raise MalformedResponse(f"Unexpected response shape from {response.url}: {e!r}") from e


def get_json(url, build, params=None):
    return decode(get_checked(url, params=params), build)
