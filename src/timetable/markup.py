"""CSS selectors identifying the marker elements of a timetable page.

Pages produced by the plan generator look like this (one data row)::

    <table class="tabela">
      <tr><th>Nr</th><th>Godz</th><th>Poniedziałek</th>...</tr>
      <tr>
        <td class="nr">1</td>
        <td class="g"> 8:00- 8:45</td>
        <td class="l"><span class="p">matematyka</span> <a href="../plany/n12.html" class="n">KW</a> <a href="../plany/s4.html" class="s">21</a></td>
        <td class="l">&nbsp;</td>
        ...
      </tr>
    </table>

A split class renders each group either wrapped in its own span, or as flat
siblings (``span.p a.n a.s <br> span.p a.n span.s``) inside the day cell.
"""

from pydantic import BaseModel

WEEKDAYS: tuple[str, ...] = ("monday", "tuesday", "wednesday", "thursday", "friday")


class Markup(BaseModel):
    """Selector set handed to the page parsers."""

    model_config = {"frozen": True}

    table: str = "table.tabela"
    row: str = "tr"
    time_cell: str = "td.g"
    day_cell: str = "td.l"
    subject: str = "span.p"
    teacher: str = "a.n"
    classroom_link: str = "a.s"
    classroom_span: str = "span.s"
    # Literal marker some pages leave in empty cells after double escaping
    empty_marker: str = "&nbsp;"
    weekdays: tuple[str, ...] = WEEKDAYS

    @property
    def occupant_parts(self) -> tuple[str, ...]:
        """Selectors of every element that is part of an occupant."""
        return (self.subject, self.teacher, self.classroom_link, self.classroom_span)


DEFAULT_MARKUP = Markup()
