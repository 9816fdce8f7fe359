import logging
import urllib.parse
from dataclasses import asdict

from flask import Flask, redirect, request, jsonify
from flask_cors import CORS

from vatsim import live
from vatsim.airport_data import get_airport
from vatsim.config import settings
from vatsim.errors import UnknownAirport, VatsimError
from vatsim.nearby import pilots_near, transceivers_near

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

app = Flask(__name__)

if settings.cors_origins:
    CORS(app, resources={r"/*": {"origins": settings.cors_origins}})

DEFAULT_RADIUS = 400  # nm
DEFAULT_TRANSCEIVER_RADIUS = 50  # nm


def _radius(default):
    try:
        return int(request.args.get("radius", default))
    except ValueError:
        return None


@app.errorhandler(UnknownAirport)
def unknown_airport(e):
    return jsonify({"error": str(e)}), 404


@app.errorhandler(VatsimError)
def upstream_error(e):
    logger.error("Upstream error: %s", e)
    return jsonify({"error": str(e)}), 502


@app.route('/airports/<icao>')
def airport(icao):
    code = icao.strip().upper()
    lat, lon = get_airport(code)
    return jsonify({"icao": code, "lat": lat, "lon": lon})


@app.route('/aircraft')
def aircraft():
    icao = request.args.get("airport", "").strip().upper()
    if not icao:
        return jsonify({"error": "Missing airport parameter"}), 400
    radius = _radius(DEFAULT_RADIUS)
    if radius is None:
        return jsonify({"error": "radius must be an integer"}), 400
    get_airport(icao)

    snapshot = live.resolve().get_v3_data()

    structured = []
    for pilot, d in pilots_near(snapshot, icao, radius):
        fp = pilot.flight_plan
        structured.append({
            'callsign': pilot.callsign,
            'route': fp.route if fp else "",
            'departure': fp.departure if fp else "",
            'destination': fp.arrival if fp else "",
            'lat': pilot.latitude,
            'lon': pilot.longitude,
            'altitude': pilot.altitude,
            'speed': pilot.groundspeed,
            'distance': d,
        })

    return jsonify({
        "updatedAt": snapshot.general.update_timestamp,
        "aircraft": structured
    })


@app.route('/transceivers')
def transceivers():
    icao = request.args.get("airport", "").strip().upper()
    if not icao:
        return jsonify({"error": "Missing airport parameter"}), 400
    radius = _radius(DEFAULT_TRANSCEIVER_RADIUS)
    if radius is None:
        return jsonify({"error": "radius must be an integer"}), 400
    get_airport(icao)

    entries = live.resolve().get_transceivers_data()

    return jsonify({
        "transceivers": [
            dict(asdict(t), callsign=callsign, distance=d)
            for callsign, t, d in transceivers_near(entries, icao, radius)
        ]
    })


@app.route('/route-to-skyvector')
def route_to_skyvector():
    callsign = request.args.get('callsign', '').upper().strip()
    if not callsign:
        return "Missing callsign parameter", 400

    snapshot = live.resolve().get_v3_data()

    for pilot in snapshot.pilots:
        if pilot.callsign.upper() != callsign:
            continue
        fp = pilot.flight_plan
        if not fp:
            return f"No flight plan found for {callsign}", 404

        dep = fp.departure.strip()
        rte = fp.route.strip()
        arr = fp.arrival.strip()

        if not (dep and arr):
            return "Flight plan is missing departure or arrival", 400

        full_route = f"{dep} {rte} {arr}".strip()
        encoded = urllib.parse.quote(" ".join(full_route.split()))
        return redirect(f"https://skyvector.com/?fpl={encoded}")

    return f"Callsign {callsign} not found in VATSIM data", 404


if __name__ == "__main__":
    app.run()
