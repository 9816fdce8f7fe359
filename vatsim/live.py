"""Live data from the VATSIM network.

The v3 and transceiver feeds are served from a pool of mirrors that the
status directory lists. ``resolve()`` picks one mirror of each kind and the
returned ``Vatsim`` value is then used for any number of fetches::

    vatsim = resolve()
    data = vatsim.get_v3_data()
    transceivers = vatsim.get_transceivers_data()

Nothing here caches or retries. Resolve again to (possibly) get different
mirrors.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import random
from typing import Callable, Sequence

from vatsim import transport
from vatsim.config import settings
from vatsim.errors import UpstreamUnavailable
from vatsim.models import Status, TransceiverResponseEntry, V3ResponseData

logger = logging.getLogger(__name__)

Chooser = Callable[[Sequence[str]], str]


@dataclass(frozen=True)
class Vatsim:
    """The pair of mirror URLs chosen by one call to ``resolve()``."""

    v3_url: str
    transceivers_url: str

    def get_v3_data(self) -> V3ResponseData:
        return fetch_live_snapshot(self)

    def get_transceivers_data(self) -> list[TransceiverResponseEntry]:
        return fetch_transceiver_snapshot(self)


def fetch_status() -> Status:
    response = transport.get(settings.status_url)
    if response.status_code != 200:
        logger.warning("Status directory %s returned %s", settings.status_url, response.status_code)
        raise UpstreamUnavailable(response.status_code)
    return transport.decode(response, Status.from_json)


def resolve(choose: Chooser = random.choice) -> Vatsim:
    """Fetch the status directory and pick one v3 and one transceivers URL.

    ``choose`` picks one entry out of a pool; the default is a uniform random
    draw. An empty pool raises ``IndexError`` whatever ``choose`` is.
    """
    data = fetch_status().data
    if not data.v3 or not data.transceivers:
        raise IndexError(
            f"Status directory lists {len(data.v3)} v3 and "
            f"{len(data.transceivers)} transceivers URLs"
        )
    vatsim = Vatsim(v3_url=choose(data.v3), transceivers_url=choose(data.transceivers))
    logger.debug("Resolved v3=%s transceivers=%s", vatsim.v3_url, vatsim.transceivers_url)
    return vatsim


def fetch_live_snapshot(vatsim: Vatsim) -> V3ResponseData:
    return transport.get_json(vatsim.v3_url, V3ResponseData.from_json)


def fetch_transceiver_snapshot(vatsim: Vatsim) -> list[TransceiverResponseEntry]:
    return transport.get_json(vatsim.transceivers_url, _transceiver_entries)


def _transceiver_entries(payload):
    return [TransceiverResponseEntry.from_json(e) for e in payload]


get_instance = resolve
get_v3_data = fetch_live_snapshot
get_transceivers_data = fetch_transceiver_snapshot
