"""Typed records mirroring the JSON the VATSIM services return.

Each record has a ``from_json`` constructor taking the decoded dict. Keys the
record does not know about are ignored; a missing key raises ``KeyError``,
which the fetch layer reports as ``MalformedResponse``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class StatusData:
    v3: list[str]
    transceivers: list[str]
    servers: list[str]
    servers_sweatbox: list[str]
    servers_all: list[str]

    @classmethod
    def from_json(cls, d: dict[str, Any]) -> StatusData:
        return cls(
            v3=list(d["v3"]),
            transceivers=list(d["transceivers"]),
            servers=list(d.get("servers") or []),
            servers_sweatbox=list(d.get("servers_sweatbox") or []),
            servers_all=list(d.get("servers_all") or []),
        )


@dataclass(frozen=True)
class Status:
    data: StatusData
    user: list[str]
    metar: list[str]

    @classmethod
    def from_json(cls, d: dict[str, Any]) -> Status:
        return cls(
            data=StatusData.from_json(d["data"]),
            user=list(d.get("user") or []),
            metar=list(d.get("metar") or []),
        )


# ---------------------------------------------------------------------------
# Live v3 feed
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FlightPlan:
    flight_rules: str
    aircraft: str
    aircraft_faa: str
    aircraft_short: str
    departure: str
    arrival: str
    alternate: str
    cruise_tas: str
    altitude: str
    deptime: str
    enroute_time: str
    fuel_time: str
    remarks: str
    route: str
    revision_id: int
    assigned_transponder: str

    @classmethod
    def from_json(cls, d: dict[str, Any]) -> FlightPlan:
        return cls(
            flight_rules=d["flight_rules"],
            aircraft=d["aircraft"],
            aircraft_faa=d["aircraft_faa"],
            aircraft_short=d["aircraft_short"],
            departure=d["departure"],
            arrival=d["arrival"],
            alternate=d["alternate"],
            cruise_tas=d["cruise_tas"],
            altitude=d["altitude"],
            deptime=d["deptime"],
            enroute_time=d["enroute_time"],
            fuel_time=d["fuel_time"],
            remarks=d["remarks"],
            route=d["route"],
            revision_id=int(d["revision_id"]),
            assigned_transponder=d["assigned_transponder"],
        )


@dataclass(frozen=True)
class Pilot:
    cid: int
    name: str
    callsign: str
    server: str
    pilot_rating: int
    latitude: float
    longitude: float
    altitude: int
    groundspeed: int
    transponder: str
    heading: int
    qnh_i_hg: float
    qnh_mb: int
    flight_plan: FlightPlan | None
    logon_time: str
    last_updated: str

    @classmethod
    def from_json(cls, d: dict[str, Any]) -> Pilot:
        fp = d["flight_plan"]
        return cls(
            cid=int(d["cid"]),
            name=d["name"],
            callsign=d["callsign"],
            server=d["server"],
            pilot_rating=int(d["pilot_rating"]),
            latitude=float(d["latitude"]),
            longitude=float(d["longitude"]),
            altitude=d["altitude"],
            groundspeed=d["groundspeed"],
            transponder=d["transponder"],
            heading=d["heading"],
            qnh_i_hg=d["qnh_i_hg"],
            qnh_mb=d["qnh_mb"],
            flight_plan=FlightPlan.from_json(fp) if fp else None,
            logon_time=d["logon_time"],
            last_updated=d["last_updated"],
        )


@dataclass(frozen=True)
class Controller:
    cid: int
    name: str
    callsign: str
    frequency: str
    facility: int
    rating: int
    server: str
    visual_range: int
    text_atis: list[str] | None
    last_updated: str
    logon_time: str

    @classmethod
    def from_json(cls, d: dict[str, Any]) -> Controller:
        return cls(
            cid=int(d["cid"]),
            name=d["name"],
            callsign=d["callsign"],
            frequency=d["frequency"],
            facility=int(d["facility"]),
            rating=int(d["rating"]),
            server=d["server"],
            visual_range=d["visual_range"],
            text_atis=_optional_list(d["text_atis"]),
            last_updated=d["last_updated"],
            logon_time=d["logon_time"],
        )


@dataclass(frozen=True)
class Atis:
    cid: int
    name: str
    callsign: str
    frequency: str
    facility: int
    rating: int
    server: str
    visual_range: int
    atis_code: str | None
    text_atis: list[str] | None
    last_updated: str
    logon_time: str

    @classmethod
    def from_json(cls, d: dict[str, Any]) -> Atis:
        return cls(
            cid=int(d["cid"]),
            name=d["name"],
            callsign=d["callsign"],
            frequency=d["frequency"],
            facility=int(d["facility"]),
            rating=int(d["rating"]),
            server=d["server"],
            visual_range=d["visual_range"],
            atis_code=d["atis_code"],
            text_atis=_optional_list(d["text_atis"]),
            last_updated=d["last_updated"],
            logon_time=d["logon_time"],
        )


@dataclass(frozen=True)
class Server:
    ident: str
    hostname_or_ip: str
    location: str
    name: str
    clients_connection_allowed: int
    client_connections_allowed: bool
    is_sweatbox: bool

    @classmethod
    def from_json(cls, d: dict[str, Any]) -> Server:
        return cls(
            ident=d["ident"],
            hostname_or_ip=d["hostname_or_ip"],
            location=d["location"],
            name=d["name"],
            clients_connection_allowed=d["clients_connection_allowed"],
            client_connections_allowed=bool(d["client_connections_allowed"]),
            is_sweatbox=bool(d["is_sweatbox"]),
        )


@dataclass(frozen=True)
class GeneralData:
    version: int
    reload: int
    update: str
    update_timestamp: str
    connected_clients: int
    unique_users: int

    @classmethod
    def from_json(cls, d: dict[str, Any]) -> GeneralData:
        return cls(
            version=d["version"],
            reload=d["reload"],
            update=d["update"],
            update_timestamp=d["update_timestamp"],
            connected_clients=d["connected_clients"],
            unique_users=d["unique_users"],
        )


@dataclass(frozen=True)
class ReferenceItem:
    id: int
    short: str
    long: str

    @classmethod
    def from_json(cls, d: dict[str, Any]) -> ReferenceItem:
        return cls(id=d["id"], short=d["short"], long=d["long"])


@dataclass(frozen=True)
class ReferenceNameItem:
    id: int
    short_name: str
    long_name: str

    @classmethod
    def from_json(cls, d: dict[str, Any]) -> ReferenceNameItem:
        return cls(id=d["id"], short_name=d["short_name"], long_name=d["long_name"])


@dataclass(frozen=True)
class V3ResponseData:
    general: GeneralData
    pilots: list[Pilot]
    controllers: list[Controller]
    atis: list[Atis]
    servers: list[Server]
    facilities: list[ReferenceItem]
    ratings: list[ReferenceItem]
    pilot_ratings: list[ReferenceNameItem]

    @classmethod
    def from_json(cls, d: dict[str, Any]) -> V3ResponseData:
        return cls(
            general=GeneralData.from_json(d["general"]),
            pilots=[Pilot.from_json(p) for p in d["pilots"]],
            controllers=[Controller.from_json(c) for c in d["controllers"]],
            atis=[Atis.from_json(a) for a in d["atis"]],
            servers=[Server.from_json(s) for s in d["servers"]],
            facilities=[ReferenceItem.from_json(f) for f in d["facilities"]],
            ratings=[ReferenceItem.from_json(r) for r in d["ratings"]],
            pilot_ratings=[ReferenceNameItem.from_json(r) for r in d["pilot_ratings"]],
        )


@dataclass(frozen=True)
class TransceiverEntry:
    id: int
    frequency: int
    lat_deg: float
    lon_deg: float
    height_msl_m: float
    height_agl_m: float

    @classmethod
    def from_json(cls, d: dict[str, Any]) -> TransceiverEntry:
        return cls(
            id=d["id"],
            frequency=d["frequency"],
            lat_deg=float(d["latDeg"]),
            lon_deg=float(d["lonDeg"]),
            height_msl_m=float(d["heightMslM"]),
            height_agl_m=float(d["heightAglM"]),
        )


@dataclass(frozen=True)
class TransceiverResponseEntry:
    callsign: str
    transceivers: list[TransceiverEntry]

    @classmethod
    def from_json(cls, d: dict[str, Any]) -> TransceiverResponseEntry:
        return cls(
            callsign=d["callsign"],
            transceivers=[TransceiverEntry.from_json(t) for t in d["transceivers"]],
        )


# ---------------------------------------------------------------------------
# REST API
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class UserRatingsSimple:
    id: str
    rating: int
    pilot_rating: int
    susp_date: str | None
    reg_date: str
    region: str
    division: str
    subdivision: str
    lastratingchange: str

    @classmethod
    def from_json(cls, d: dict[str, Any]) -> UserRatingsSimple:
        return cls(
            id=str(d["id"]),
            rating=d["rating"],
            pilot_rating=d["pilot_rating"],
            susp_date=d["susp_date"],
            reg_date=d["reg_date"],
            region=d["region"],
            division=d["division"],
            subdivision=d["subdivision"],
            lastratingchange=d["lastratingchange"],
        )


@dataclass(frozen=True)
class RatingsTimeData:
    id: int
    atc: float
    pilot: float
    s1: float
    s2: float
    s3: float
    c1: float
    c2: float
    c3: float
    i1: float
    i2: float
    i3: float
    sup: float
    adm: float

    @classmethod
    def from_json(cls, d: dict[str, Any]) -> RatingsTimeData:
        return cls(
            id=int(d["id"]),
            **{k: d[k] for k in ("atc", "pilot", "s1", "s2", "s3", "c1", "c2", "c3",
                                 "i1", "i2", "i3", "sup", "adm")},
        )


@dataclass(frozen=True)
class ConnectionEntry:
    id: int
    vatsim_id: str
    type: int
    rating: int
    callsign: str
    start: str
    end: str | None
    server: str

    @classmethod
    def from_json(cls, d: dict[str, Any]) -> ConnectionEntry:
        return cls(
            id=d["id"],
            vatsim_id=str(d["vatsim_id"]),
            type=d["type"],
            rating=d["rating"],
            callsign=d["callsign"],
            start=d["start"],
            end=d["end"],
            server=d["server"],
        )


_ATC_SESSION_FIELDS = (
    "connection_id", "start", "end", "server", "vatsim_id", "type", "rating",
    "callsign", "minutes_on_callsign", "total_minutes_on_callsign",
    "total_aircraft_tracked", "total_aircraft_seen", "total_flights_amended",
    "total_handoffs_initiated", "total_handoffs_received", "total_handoffs_refused",
    "total_squawks_assigned", "total_cruisealts_modified", "total_tempalts_modified",
    "total_scratchpadmods", "aircrafttracked", "aircraftseen", "flightsamended",
    "handoffsinitiated", "handoffsreceived", "handoffsrefused", "squawksassigned",
    "cruisealtsmodified", "tempaltsmodified", "scratchpadmods",
)


@dataclass(frozen=True)
class AtcSessionEntry:
    connection_id: int
    start: str
    end: str | None
    server: str
    vatsim_id: str
    type: int
    rating: int
    callsign: str
    minutes_on_callsign: str
    total_minutes_on_callsign: float
    total_aircraft_tracked: int
    total_aircraft_seen: int
    total_flights_amended: int
    total_handoffs_initiated: int
    total_handoffs_received: int
    total_handoffs_refused: int
    total_squawks_assigned: int
    total_cruisealts_modified: int
    total_tempalts_modified: int
    total_scratchpadmods: int
    aircrafttracked: int
    aircraftseen: int
    flightsamended: int
    handoffsinitiated: int
    handoffsreceived: int
    handoffsrefused: int
    squawksassigned: int
    cruisealtsmodified: int
    tempaltsmodified: int
    scratchpadmods: int

    @classmethod
    def from_json(cls, d: dict[str, Any]) -> AtcSessionEntry:
        return cls(**{k: d[k] for k in _ATC_SESSION_FIELDS})


_REST_FLIGHT_PLAN_FIELDS = (
    "id", "connection_id", "vatsim_id", "flight_type", "callsign", "aircraft",
    "cruisespeed", "dep", "arr", "alt", "altitude", "rmks", "route", "deptime",
    "hrsenroute", "minenroute", "hrsfuel", "minsfuel", "filed", "assignedsquawk",
    "modifiedbycid", "modifiedbycallsign",
)


@dataclass(frozen=True)
class RestFlightPlan:
    """A filed flight plan as the REST API reports it.

    The field names differ from ``FlightPlan`` in the live feed.
    """

    id: int
    connection_id: int
    vatsim_id: str
    flight_type: str
    callsign: str
    aircraft: str
    cruisespeed: str
    dep: str
    arr: str
    alt: str
    altitude: str
    rmks: str
    route: str
    deptime: str
    hrsenroute: int
    minenroute: int
    hrsfuel: int
    minsfuel: int
    filed: str
    assignedsquawk: str
    modifiedbycid: str
    modifiedbycallsign: str

    @classmethod
    def from_json(cls, d: dict[str, Any]) -> RestFlightPlan:
        return cls(**{k: d[k] for k in _REST_FLIGHT_PLAN_FIELDS})


@dataclass(frozen=True)
class Region:
    id: str
    name: str
    director: str

    @classmethod
    def from_json(cls, d: dict[str, Any]) -> Region:
        return cls(id=d["id"], name=d["name"], director=d["director"])


@dataclass(frozen=True)
class Facility:
    id: str
    start: str
    callsign: str
    rating: int

    @classmethod
    def from_json(cls, d: dict[str, Any]) -> Facility:
        return cls(id=str(d["id"]), start=d["start"], callsign=d["callsign"], rating=d["rating"])


@dataclass(frozen=True)
class PaginatedResponse(Generic[T]):
    """One page of results, with links to the neighbouring pages if any."""

    count: int
    next: str | None
    previous: str | None
    results: list[T]

    @classmethod
    def from_json(cls, d: dict[str, Any], item: Callable[[dict[str, Any]], T]) -> PaginatedResponse[T]:
        return cls(
            count=d["count"],
            next=d["next"],
            previous=d["previous"],
            results=[item(r) for r in d["results"]],
        )


def _optional_list(value: Any) -> list[str] | None:
    if value is None:
        return None
    return list(value)
