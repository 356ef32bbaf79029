import logging
import os

from dotenv import dotenv_values, load_dotenv

load_dotenv()
settings = dotenv_values()


def _setting(key: str, default: str) -> str:
    return settings.get(key) or os.getenv(key) or default


YEAR_MIN = int(_setting("CALENDAR_YEAR_MIN", "1990"))
YEAR_MAX = int(_setting("CALENDAR_YEAR_MAX", "2040"))
ROUTE_PREFIX = _setting("CALENDAR_ROUTE_PREFIX", "/calendar").rstrip("/")
LOG_LEVEL = _setting("CALENDAR_LOG_LEVEL", "WARNING").upper()


def configure_logging(level: str | None = None) -> None:
    """Configure the `datepicker` logger hierarchy."""
    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger("datepicker").setLevel(level or LOG_LEVEL)
