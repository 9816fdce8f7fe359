"""Relate live network positions to airports. Distances are nautical miles.

Radius checks use the exact distance; only the reported distance is rounded.
"""

from vatsim.airport_data import AIRPORTS, get_airport
from vatsim.dist import finddist


def nearest_airport(lat, lon):
    """``(icao, distance)`` of the closest airport in the table."""
    icao, d = min(
        ((icao, finddist(lat, lon, alat, alon)) for icao, alat, alon in AIRPORTS),
        key=lambda pair: pair[1],
    )
    return icao, round(d)


def airports_within(lat, lon, radius):
    found = []
    for icao, alat, alon in AIRPORTS:
        d = finddist(lat, lon, alat, alon)
        if d <= radius:
            found.append((icao, d))
    found.sort(key=lambda pair: pair[1])
    return [(icao, round(d)) for icao, d in found]


def pilots_near(snapshot, icao, radius):
    """Pilots in a v3 snapshot within ``radius`` of an airport, closest first."""
    target_lat, target_lon = get_airport(icao)

    result = []
    for pilot in snapshot.pilots:
        d = finddist(target_lat, target_lon, pilot.latitude, pilot.longitude)
        if d <= radius:
            result.append((pilot, d))
    result.sort(key=lambda pair: pair[1])
    return [(pilot, round(d)) for pilot, d in result]


def transceivers_near(entries, icao, radius):
    """``(callsign, transceiver, distance)`` for every transceiver within range."""
    target_lat, target_lon = get_airport(icao)

    result = []
    for entry in entries:
        for t in entry.transceivers:
            d = finddist(target_lat, target_lon, t.lat_deg, t.lon_deg)
            if d <= radius:
                result.append((entry.callsign, t, d))
    result.sort(key=lambda row: row[2])
    return [(callsign, t, round(d)) for callsign, t, d in result]
