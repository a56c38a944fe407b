"""Fetch-and-extract entry points shared by the HTTP service and scripts."""

import re

from src.timetable.client import fetch_html
from src.timetable.config import TimetableConfig, get_config
from src.timetable.errors import InvalidScheduleId
from src.timetable.logging import get_logger
from src.timetable.models import ClassEntry, Schedule
from src.timetable.pages.classes import ClassesPage
from src.timetable.pages.schedule import SchedulePage

log = get_logger(__name__)

# Page basenames on the timetable site: o29, n12, s4
_SCHEDULE_ID = re.compile(r"[A-Za-z0-9_]+")


def schedule_url(schedule_id: str, config: TimetableConfig | None = None) -> str:
    """Build the page URL of a timetable identifier.

    Raises:
        InvalidScheduleId: The identifier is not a plain page basename.
    """
    config = config or get_config()
    if not _SCHEDULE_ID.fullmatch(schedule_id):
        raise InvalidScheduleId(f"Invalid timetable identifier {schedule_id!r}")
    return (
        f"{config.base_url}/{config.schedule_path}/"
        f"{schedule_id}{config.schedule_suffix}"
    )


def get_schedule(
    schedule_id: str,
    config: TimetableConfig | None = None,
    page: SchedulePage | None = None,
) -> Schedule:
    """Download and extract one class timetable."""
    config = config or get_config()
    url = schedule_url(schedule_id, config)
    html = fetch_html(url, config)
    schedule = (page or SchedulePage()).extract(html)
    log.info("schedule_loaded", schedule_id=schedule_id, rows=len(schedule))
    return schedule


def get_classes(config: TimetableConfig | None = None) -> list[ClassEntry]:
    """Download and extract the class catalog."""
    config = config or get_config()
    html = fetch_html(config.classes_url, config)
    return ClassesPage(config.practice_postfix).extract(html, config.base_url)
