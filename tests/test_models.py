"""
Tests for schedule models and their JSON form.
"""

import json

import pytest
from pydantic import ValidationError

from src.timetable.models import (
    GroupedField,
    Occupant,
    Schedule,
    ScheduleRow,
    SingleField,
    field_kind,
)
from src.timetable.pages.schedule import SchedulePage

ALGEBRA = Occupant(subject="matematyka", teacher="KW", classroom="21")
ENGLISH = Occupant(subject="j.angielski", teacher="BK", classroom="31")
GERMAN = Occupant(subject="j.niemiecki", teacher="MZ")


@pytest.fixture
def schedule() -> Schedule:
    return Schedule(
        [
            ScheduleRow(
                time="8:00-8:45",
                monday=SingleField(ALGEBRA),
                thursday=GroupedField({1: ENGLISH, 2: GERMAN}),
            ),
            ScheduleRow(time="8:50-9:35", friday=GroupedField({0: ALGEBRA})),
        ]
    )


class TestSerialization:
    """JSON shape of a schedule."""

    def test_shape(self, schedule):
        data = json.loads(schedule.model_dump_json())

        assert data[0] == {
            "time": "8:00-8:45",
            "monday": {"subject": "matematyka", "teacher": "KW", "classroom": "21"},
            "tuesday": None,
            "wednesday": None,
            "thursday": {
                "1": {"subject": "j.angielski", "teacher": "BK", "classroom": "31"},
                "2": {"subject": "j.niemiecki", "teacher": "MZ", "classroom": ""},
            },
            "friday": None,
        }

    def test_round_trip(self, schedule):
        restored = Schedule.model_validate_json(schedule.model_dump_json())

        assert restored == schedule
        assert isinstance(restored[0].monday, SingleField)
        assert isinstance(restored[0].thursday, GroupedField)
        assert isinstance(restored[1].friday, GroupedField)
        assert restored[1].friday[0] == ALGEBRA

    def test_round_trip_of_extracted_page(self, plan_html):
        schedule = SchedulePage().extract(plan_html)

        restored = Schedule.model_validate_json(schedule.model_dump_json())

        assert restored == schedule
        assert [
            [field_kind(row.day(day)) for day in ("monday", "thursday")]
            for row in restored
        ] == [
            [field_kind(row.day(day)) for day in ("monday", "thursday")]
            for row in schedule
        ]

    def test_columns(self, schedule):
        columns = schedule.to_columns()

        assert columns.time == ["8:00-8:45", "8:50-9:35"]
        assert columns.monday == [SingleField(ALGEBRA), None]
        assert columns.tuesday == [None, None]
        assert len(columns.friday) == 2


class TestValidation:
    """Constraints enforced on construction."""

    def test_field_kind(self):
        assert field_kind(None) == "empty"
        assert field_kind(SingleField(ALGEBRA)) == "single"
        assert field_kind(GroupedField({})) == "grouped"

    def test_empty_time_rejected(self):
        with pytest.raises(ValidationError):
            ScheduleRow(time="")

    def test_occupant_requires_subject_and_teacher(self):
        with pytest.raises(ValidationError):
            Occupant(subject="matematyka")

    def test_group_number_range(self):
        with pytest.raises(ValidationError):
            GroupedField({256: ALGEBRA})

    def test_occupant_is_frozen(self):
        with pytest.raises(ValidationError):
            ALGEBRA.subject = "fizyka"

    def test_unknown_weekday(self, schedule):
        with pytest.raises(KeyError):
            schedule[0].day("saturday")
