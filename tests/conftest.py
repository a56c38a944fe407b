"""Shared fixtures: saved timetable and catalog pages."""

from pathlib import Path

import pytest

from src.timetable.config import TimetableConfig

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def plan_html() -> bytes:
    """Timetable page of class 2 TI with 8 lesson rows."""
    return (FIXTURES / "plan_o6.html").read_bytes()


@pytest.fixture
def classes_html() -> bytes:
    """Class listing page with three plan links."""
    return (FIXTURES / "lll.html").read_bytes()


@pytest.fixture
def config() -> TimetableConfig:
    return TimetableConfig(
        base_url="https://plan.example.edu/plany",
        max_retries=2,
        request_timeout=5,
        host="127.0.0.1",
        port=0,
    )
