"""SchedulePage - extracts the weekly timetable of one class.

The timetable page is a single ``table.tabela``:
    tr -> th per column (header row, skipped)
    tr -> td.nr (lesson number), td.g (time label), td.l per weekday Mon..Fri

A row is schedule data iff it has a ``td.g`` with text. Its day cells are
parsed by parse_cell() in weekday order.
"""

import structlog
from bs4 import BeautifulSoup, Tag

from src.timetable.errors import IncompleteRow, MissingTimetable
from src.timetable.logging import get_logger
from src.timetable.markup import DEFAULT_MARKUP, Markup
from src.timetable.models import Schedule, ScheduleRow
from src.timetable.pages.cells import parse_cell

log = get_logger(__name__)


class SchedulePage:
    """Timetable page at {base_url}/plany/{id}.html.

    Parsing is pure: one instance can extract any number of documents,
    from any number of threads.
    """

    def __init__(self, markup: Markup = DEFAULT_MARKUP) -> None:
        self.markup = markup

    def extract(self, html: str | bytes) -> Schedule:
        """Extract the schedule from a full timetable document.

        Args:
            html: Page markup. Pass bytes to let the parser honour the
                charset declared by the page.

        Returns:
            Schedule with one row per time-labelled table row, in document
            order. Rows with too few day cells are skipped with a warning.

        Raises:
            MissingTimetable: The document has no timetable table.
        """
        document = BeautifulSoup(html, "html.parser")
        table = document.select_one(self.markup.table)
        if table is None:
            raise MissingTimetable(f"No {self.markup.table} element in document")

        rows: list[ScheduleRow] = []
        skipped = 0
        for tr in table.select(self.markup.row):
            try:
                row = self.parse_row(tr)
            except IncompleteRow as e:
                log.warning("row_skipped", time=e.time, day_cells=e.found)
                skipped += 1
                continue
            if row is not None:
                rows.append(row)

        log.info("schedule_extracted", rows=len(rows), skipped=skipped)
        return Schedule(rows)

    def parse_row(self, tr: Tag) -> ScheduleRow | None:
        """Parse one table row.

        Returns:
            ScheduleRow, or None for header and spacer rows (no time label).

        Raises:
            IncompleteRow: The row has a time label but fewer than five day cells.
        """
        time_cell = tr.select_one(self.markup.time_cell)
        if time_cell is None:
            return None

        # " 8:00- 8:45" -> "8:00-8:45"
        time = "".join(time_cell.get_text().split())
        if not time:
            return None

        weekdays = self.markup.weekdays
        cells = tr.select(self.markup.day_cell)
        if len(cells) < len(weekdays):
            raise IncompleteRow(time, len(cells))
        if len(cells) > len(weekdays):
            log.debug("extra_day_cells_ignored", time=time, day_cells=len(cells))

        fields = {}
        for weekday, cell in zip(weekdays, cells):
            with structlog.contextvars.bound_contextvars(time=time, weekday=weekday):
                fields[weekday] = parse_cell(cell, self.markup)

        return ScheduleRow(time=time, **fields)
