class VatsimError(Exception):
    """Base class for everything this package raises on its own."""


class UpstreamUnavailable(VatsimError):
    """The status directory answered with something other than 200."""

    def __init__(self, status_code):
        self.status_code = status_code
        super().__init__(f"Got status {status_code} from the VATSIM status endpoint")


class FetchFailed(VatsimError):
    """A live feed or REST resource answered with status >= 400."""

    def __init__(self, status_code, url=None):
        self.status_code = status_code
        self.url = url
        super().__init__(f"Got status code {status_code} from endpoint")


class MalformedResponse(VatsimError, ValueError):
    """The body was not JSON, or was missing a field the record requires."""


class UnknownAirport(VatsimError, KeyError):
    def __init__(self, icao):
        self.icao = icao
        super().__init__(icao)

    def __str__(self):
        return f"Unknown airport: {self.icao}"
