from vatsim.config import __version__
from vatsim.dist import finddist, haversine_distance
from vatsim.airport_data import AIRPORTS, get_airport, get_airports_map
from vatsim.errors import (
    FetchFailed,
    MalformedResponse,
    UnknownAirport,
    UpstreamUnavailable,
    VatsimError,
)
from vatsim.live import (
    Vatsim,
    fetch_live_snapshot,
    fetch_status,
    fetch_transceiver_snapshot,
    get_instance,
    get_transceivers_data,
    get_v3_data,
    resolve,
)
