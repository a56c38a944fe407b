"""Timetable scraper for the ZSEM school plan pages.

Extracts the weekly timetable of a class from the plan generator's HTML into
typed, JSON-serializable models, and lists the available class timetables.
"""

from src.timetable.markup import DEFAULT_MARKUP, WEEKDAYS, Markup
from src.timetable.models import (
    ClassEntry,
    GroupedField,
    Occupant,
    Schedule,
    ScheduleRow,
    SingleField,
    WeekdayField,
)
from src.timetable.pages.classes import ClassesPage
from src.timetable.pages.schedule import SchedulePage

__all__ = [
    "SchedulePage",
    "ClassesPage",
    "Markup",
    "DEFAULT_MARKUP",
    "WEEKDAYS",
    "ClassEntry",
    "GroupedField",
    "Occupant",
    "Schedule",
    "ScheduleRow",
    "SingleField",
    "WeekdayField",
]
