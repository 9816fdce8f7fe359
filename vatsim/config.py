from __future__ import annotations

from dataclasses import dataclass
import os

from dotenv import load_dotenv


load_dotenv()

__version__ = "0.3.0"


def _timeout(value: str | None) -> float | None:
    if not value:
        return None
    return float(value)


@dataclass(frozen=True)
class Settings:
    status_url: str = os.getenv("VATSIM_STATUS_URL", "https://status.vatsim.net/status.json")
    api_url: str = os.getenv("VATSIM_API_URL", "https://api.vatsim.net/api")
    stats_url: str = os.getenv("VATSIM_STATS_URL", "https://stats.vatsim.net/stats")

    # None leaves requests on its own default (no timeout)
    timeout: float | None = _timeout(os.getenv("VATSIM_TIMEOUT"))
    user_agent: str = os.getenv("VATSIM_USER_AGENT", f"vatsim-data/{__version__}")

    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    cors_origins: tuple[str, ...] = tuple(o for o in os.getenv("CORS_ORIGINS", "").split(",") if o)

    @property
    def headers(self) -> dict[str, str]:
        return {"Accept": "application/json", "User-Agent": self.user_agent}


settings = Settings()
