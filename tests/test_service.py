"""
Tests for the fetch-and-extract entry points.
"""

from unittest.mock import patch

import pytest

from src.timetable import service
from src.timetable.errors import InvalidScheduleId, MissingTimetable


class TestScheduleUrl:
    """Timetable identifier to page URL."""

    def test_url(self, config):
        assert (
            service.schedule_url("o29", config)
            == "https://plan.example.edu/plany/plany/o29.html"
        )

    @pytest.mark.parametrize("schedule_id", ["", "../lll", "o29.html", "o 29", "o29?x=1"])
    def test_invalid_id(self, config, schedule_id):
        with pytest.raises(InvalidScheduleId):
            service.schedule_url(schedule_id, config)


class TestGetSchedule:
    """Download plus extraction."""

    def test_schedule(self, config, plan_html):
        with patch("src.timetable.service.fetch_html", return_value=plan_html) as fetch:
            schedule = service.get_schedule("o6", config)

        fetch.assert_called_once_with(
            "https://plan.example.edu/plany/plany/o6.html", config
        )
        assert len(schedule) == 8

    def test_page_without_timetable(self, config):
        with patch("src.timetable.service.fetch_html", return_value=b"<html></html>"):
            with pytest.raises(MissingTimetable):
                service.get_schedule("o6", config)

    def test_invalid_id_is_not_fetched(self, config):
        with patch("src.timetable.service.fetch_html") as fetch:
            with pytest.raises(InvalidScheduleId):
                service.get_schedule("../secret", config)

        fetch.assert_not_called()


class TestGetClasses:
    """Catalog download."""

    def test_classes(self, config, classes_html):
        with patch("src.timetable.service.fetch_html", return_value=classes_html) as fetch:
            classes = service.get_classes(config)

        fetch.assert_called_once_with("https://plan.example.edu/plany/lll.php", config)
        assert [entry.id for entry in classes] == ["o1", "o6", "o29"]
        assert classes[0].url == "https://plan.example.edu/plany/plany/o1.html"
