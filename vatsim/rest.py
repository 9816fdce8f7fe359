"""VATSIM's public REST API on api.vatsim.net, plus the stats page URL.

These are plain functions rather than methods on ``Vatsim``: the URLs are
fixed and do not depend on a preceding status lookup.
"""

from __future__ import annotations

from functools import partial

from vatsim.config import settings
from vatsim.models import (
    AtcSessionEntry,
    ConnectionEntry,
    Facility,
    PaginatedResponse,
    RatingsTimeData,
    Region,
    RestFlightPlan,
    UserRatingsSimple,
)
from vatsim.transport import get_json


def _params(**kwargs) -> dict[str, str]:
    return {k: str(v) for k, v in kwargs.items() if v is not None}


def _list_of(item):
    return lambda payload: [item(e) for e in payload]


def _page_of(item):
    return partial(PaginatedResponse.from_json, item=item)


def get_stats_url(cid: int) -> str:
    """URL of the user's page on stats.vatsim.net. No request is made."""
    return f"{settings.stats_url}/{cid}"


def get_user_ratings(cid: int) -> UserRatingsSimple:
    return get_json(f"{settings.api_url}/ratings/{cid}/", UserRatingsSimple.from_json)


def get_ratings_times(cid: int) -> RatingsTimeData:
    """Hours the user has spent connected as a pilot and at each ATC rating."""
    return get_json(f"{settings.api_url}/ratings/{cid}/rating_times", RatingsTimeData.from_json)


def get_connections(cid: int, page: int | None = None) -> PaginatedResponse[ConnectionEntry]:
    return get_json(
        f"{settings.api_url}/ratings/{cid}/connections",
        _page_of(ConnectionEntry.from_json),
        params=_params(page=page),
    )


def get_atc_sessions(
    cid: int,
    page: int | None = None,
    specifier: str | None = None,
    start: str | None = None,
    date: str | None = None,
) -> PaginatedResponse[AtcSessionEntry]:
    """The user's ATC sessions.

    ``specifier`` narrows the result to a position (``"SAN_TWR"``), ``start``
    and ``date`` take ``YYYY-MM-DD`` strings.
    """
    return get_json(
        f"{settings.api_url}/ratings/{cid}/atcsessions/",
        _page_of(AtcSessionEntry.from_json),
        params=_params(page=page, specifier=specifier, start=start, date=date),
    )


def get_flight_plans(cid: int, page: int | None = None) -> PaginatedResponse[RestFlightPlan]:
    return get_json(
        f"{settings.api_url}/ratings/{cid}/flight_plans",
        _page_of(RestFlightPlan.from_json),
        params=_params(page=page),
    )


def get_regions() -> list[Region]:
    return get_json(f"{settings.api_url}/regions/", _list_of(Region.from_json))


def get_online_facilities() -> list[Facility]:
    """Facilities currently staffed by ATC."""
    return get_json(f"{settings.api_url}/facilities/", _list_of(Facility.from_json))


def get_facility_history(
    specifier: str,
    page: int | None = None,
    start: str | None = None,
    date: str | None = None,
) -> PaginatedResponse[AtcSessionEntry]:
    return get_json(
        f"{settings.api_url}/facilities/{specifier}",
        _page_of(AtcSessionEntry.from_json),
        params=_params(page=page, start=start, date=date),
    )
