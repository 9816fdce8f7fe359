import json
import os
from types import MappingProxyType

from vatsim.errors import UnknownAirport

DATA_FILE = os.path.join(os.path.dirname(__file__), "data", "airports.json")

with open(DATA_FILE, "r") as f:
    # [icao, lat, lon] rows, loaded once and never written again
    AIRPORTS = [(icao.upper(), float(lat), float(lon)) for icao, lat, lon in json.load(f)]

_AIRPORTS_MAP = MappingProxyType({icao: (lat, lon) for icao, lat, lon in AIRPORTS})


def get_airports_map():
    """Read-only mapping of ICAO code to ``(latitude, longitude)``."""
    return _AIRPORTS_MAP


def get_airport(icao):
    code = (icao or "").strip().upper()
    try:
        lat, lon = _AIRPORTS_MAP[code]
    except KeyError:
        raise UnknownAirport(code) from None
    return lat, lon
