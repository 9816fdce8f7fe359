"""Shared fixtures: canned VATSIM payloads and a patched ``requests.get``."""

import json
from unittest.mock import MagicMock, patch

import pytest


def make_response(status_code=200, payload=None, url="https://example.test/", body=None):
    resp = MagicMock()
    resp.status_code = status_code
    resp.url = url
    if body is not None:
        resp.json.side_effect = json.JSONDecodeError("Expecting value", body, 0)
    else:
        resp.json.return_value = payload
    return resp


@pytest.fixture
def mock_get():
    """Patch the single GET every request in the package goes through."""
    with patch("vatsim.transport.requests.get") as m:
        yield m


@pytest.fixture
def status_payload():
    return {
        "data": {
            "v3": ["https://data.vatsim.net/v3/vatsim-data.json"],
            "transceivers": ["https://data.vatsim.net/v3/transceivers-data.json"],
            "servers": ["https://data.vatsim.net/v3/vatsim-servers.json"],
            "servers_sweatbox": ["https://data.vatsim.net/v3/sweatbox-servers.json"],
            "servers_all": ["https://data.vatsim.net/v3/all-servers.json"],
        },
        "user": ["https://stats.vatsim.net/search_id.php"],
        "metar": ["https://metar.vatsim.net/metar.php"],
    }


def pilot_json(callsign, lat, lon, flight_plan=True):
    fp = None
    if flight_plan:
        fp = {
            "flight_rules": "I",
            "aircraft": "B738/M-SDE3FGHIRWXY/LB1",
            "aircraft_faa": "H/B738/L",
            "aircraft_short": "B738",
            "departure": "KSAN",
            "arrival": "KSFO",
            "alternate": "KOAK",
            "cruise_tas": "450",
            "altitude": "35000",
            "deptime": "1800",
            "enroute_time": "0120",
            "fuel_time": "0300",
            "remarks": "/V/",
            "route": "ZZOOO2 ZZOOO DCT LAX",
            "revision_id": 2,
            "assigned_transponder": "4512",
        }
    return {
        "cid": 1234567,
        "name": "Test Pilot",
        "callsign": callsign,
        "server": "USA-WEST",
        "pilot_rating": 0,
        "latitude": lat,
        "longitude": lon,
        "altitude": 12000,
        "groundspeed": 280,
        "transponder": "4512",
        "heading": 300,
        "qnh_i_hg": 29.92,
        "qnh_mb": 1013,
        "flight_plan": fp,
        "logon_time": "2024-01-01T18:00:00Z",
        "last_updated": "2024-01-01T18:30:00Z",
    }


@pytest.fixture
def v3_payload():
    return {
        "general": {
            "version": 3,
            "reload": 1,
            "update": "20240101183000",
            "update_timestamp": "2024-01-01T18:30:00Z",
            "connected_clients": 3,
            "unique_users": 3,
        },
        "pilots": [
            pilot_json("SWA123", 32.80, -117.20),
            pilot_json("UAL1", 33.90, -118.40, flight_plan=False),
            pilot_json("DAL42", 40.64, -73.78),
        ],
        "controllers": [
            {
                "cid": 7654321,
                "name": "Test Controller",
                "callsign": "SAN_TWR",
                "frequency": "118.300",
                "facility": 4,
                "rating": 3,
                "server": "USA-WEST",
                "visual_range": 50,
                "text_atis": None,
                "last_updated": "2024-01-01T18:30:00Z",
                "logon_time": "2024-01-01T17:00:00Z",
            }
        ],
        "atis": [
            {
                "cid": 7654321,
                "name": "Test Controller",
                "callsign": "KSAN_ATIS",
                "frequency": "134.800",
                "facility": 4,
                "rating": 3,
                "server": "USA-WEST",
                "visual_range": 0,
                "atis_code": "A",
                "text_atis": ["SAN DIEGO INFO A", "RWY 27 IN USE"],
                "last_updated": "2024-01-01T18:30:00Z",
                "logon_time": "2024-01-01T17:00:00Z",
            }
        ],
        "servers": [
            {
                "ident": "USA-WEST",
                "hostname_or_ip": "127.0.0.1",
                "location": "San Francisco",
                "name": "USA-WEST",
                "clients_connection_allowed": 1,
                "client_connections_allowed": True,
                "is_sweatbox": False,
            }
        ],
        "facilities": [{"id": 4, "short": "TWR", "long": "Tower"}],
        "ratings": [{"id": 3, "short": "S2", "long": "Tower Trainee"}],
        "pilot_ratings": [{"id": 0, "short_name": "NEW", "long_name": "Basic Member"}],
    }


@pytest.fixture
def transceivers_payload():
    return [
        {
            "callsign": "SWA123",
            "transceivers": [
                {
                    "id": 0,
                    "frequency": 118300000,
                    "latDeg": 32.80,
                    "lonDeg": -117.20,
                    "heightMslM": 3657.6,
                    "heightAglM": 3650.0,
                }
            ],
        },
        {
            "callsign": "DAL42",
            "transceivers": [
                {
                    "id": 0,
                    "frequency": 119100000,
                    "latDeg": 40.64,
                    "lonDeg": -73.78,
                    "heightMslM": 4.0,
                    "heightAglM": 0.0,
                },
                {
                    "id": 1,
                    "frequency": 121900000,
                    "latDeg": 40.64,
                    "lonDeg": -73.78,
                    "heightMslM": 4.0,
                    "heightAglM": 0.0,
                },
            ],
        },
    ]


@pytest.fixture
def flask_client():
    from vatsim.app import app

    app.config["TESTING"] = True
    with app.test_client() as client:
        yield client
