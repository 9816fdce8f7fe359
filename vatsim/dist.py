from math import radians, sin, cos, atan2, sqrt

EARTH_RADIUS_NM = 3440.065  # Radius of Earth in nautical miles
EARTH_RADIUS_MI = 3958.761
EARTH_RADIUS_KM = 6371.0


def finddist(lat1, lon1, lat2, lon2, radius=EARTH_RADIUS_NM):
    """Great-circle distance between two points given in decimal degrees.

    The result is in whatever unit ``radius`` is expressed in, nautical
    miles unless told otherwise.
    """
    dlat = radians(lat2 - lat1)
    dlon = radians(lon2 - lon1)
    a = sin(dlat/2)**2 + cos(radians(lat1)) * cos(radians(lat2)) * sin(dlon/2)**2
    # rounding error can push a just outside [0, 1] for antipodal points
    a = min(1.0, max(0.0, a))
    c = 2 * atan2(sqrt(a), sqrt(1 - a))
    return radius * c


def haversine_distance(lat1, lon1, lat2, lon2):
    """Distance between two points in nautical miles, rounded to a whole mile."""
    return round(finddist(lat1, lon1, lat2, lon2))
