"""Pydantic models for timetable data.

All data structures use Pydantic v2 for validation, serialization, and type
safety. Models are frozen: they are built once per extraction and never
mutated afterwards.

A weekday field is a closed variant:

    None          -> empty cell                  (JSON: null)
    SingleField   -> one class for the whole form (JSON: {"subject", "teacher", "classroom"})
    GroupedField  -> parallel groups by number    (JSON: {"1": {...}, "2": {...}})
"""

from typing import Annotated, Iterator, Literal

from pydantic import BaseModel, ConfigDict, Field, RootModel

from src.timetable.markup import WEEKDAYS

GroupNumber = Annotated[int, Field(ge=0, le=255)]


class Occupant(BaseModel):
    """One class session: what is taught, by whom, and where."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    subject: str  # "matematyka", "j.angielski"
    teacher: str  # Teacher initials from a.n, e.g. "KW"
    classroom: str = ""  # Room from a.s or span.s; empty when not recorded


class SingleField(RootModel[Occupant]):
    """The whole form attends one class."""

    model_config = ConfigDict(frozen=True)

    @property
    def occupant(self) -> Occupant:
        return self.root


class GroupedField(RootModel[dict[GroupNumber, Occupant]]):
    """The form is split into parallel groups keyed by group number.

    Group 0 holds an occupant whose subject carried no group suffix.
    """

    model_config = ConfigDict(frozen=True)

    @property
    def groups(self) -> dict[int, Occupant]:
        return self.root

    def __getitem__(self, group: int) -> Occupant:
        return self.root[group]

    def __len__(self) -> int:
        return len(self.root)


WeekdayField = SingleField | GroupedField | None

FieldKind = Literal["empty", "single", "grouped"]


def field_kind(field: WeekdayField) -> FieldKind:
    """Name the variant of a weekday field."""
    if field is None:
        return "empty"
    if isinstance(field, SingleField):
        return "single"
    return "grouped"


class ScheduleRow(BaseModel):
    """One time slot across the five weekdays."""

    model_config = ConfigDict(frozen=True)

    time: str = Field(min_length=1)  # "8:00-8:45", whitespace removed
    monday: WeekdayField = None
    tuesday: WeekdayField = None
    wednesday: WeekdayField = None
    thursday: WeekdayField = None
    friday: WeekdayField = None

    def day(self, weekday: str) -> WeekdayField:
        if weekday not in WEEKDAYS:
            raise KeyError(weekday)
        return getattr(self, weekday)


class ScheduleColumns(BaseModel):
    """Column-oriented view: one list per weekday, aligned with ``time``."""

    model_config = ConfigDict(frozen=True)

    time: list[str] = []
    monday: list[WeekdayField] = []
    tuesday: list[WeekdayField] = []
    wednesday: list[WeekdayField] = []
    thursday: list[WeekdayField] = []
    friday: list[WeekdayField] = []


class Schedule(RootModel[list[ScheduleRow]]):
    """Rows in document order (chronological by time slot)."""

    model_config = ConfigDict(frozen=True)

    def __iter__(self) -> Iterator[ScheduleRow]:  # type: ignore[override]
        return iter(self.root)

    def __getitem__(self, index: int) -> ScheduleRow:
        return self.root[index]

    def __len__(self) -> int:
        return len(self.root)

    def to_columns(self) -> ScheduleColumns:
        columns: dict[str, list] = {"time": [row.time for row in self.root]}
        for weekday in WEEKDAYS:
            columns[weekday] = [row.day(weekday) for row in self.root]
        return ScheduleColumns(**columns)


class ClassEntry(BaseModel):
    """One timetable listed on the class catalog page."""

    model_config = ConfigDict(frozen=True)

    id: str  # Page basename, e.g. "o29" for plany/o29.html
    name: str  # Display name without the practice marker, e.g. "3 TI"
    url: str  # Absolute URL of the timetable page
    is_on_practice: bool = False  # Name carried the "prakt." marker
