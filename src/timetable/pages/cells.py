"""Day-cell parsing: turn one ``td.l`` into an empty, single or grouped field.

A cell with one subject marker is a single class. A cell with several markers
holds parallel groups, rendered by the plan generator in one of two shapes:

  wrapped:  <span><span class="p">inf-1/2</span> <a class="n">AB</a> <a class="s">12</a></span><br>
            <span><span class="p">inf-2/2</span> <a class="n">CD</a> <a class="s">14</a></span>

  flat:     <span class="p">inf-1/2</span> <a class="n">AB</a> <a class="s">12</a><br>
            <span class="p">inf-2/2</span> <a class="n">CD</a> <span class="s">14</span>

Wrapped groups are parsed from their wrapper. Flat groups are reassembled by
position: the i-th subject marker goes with the i-th teacher link and the i-th
classroom link, or the i-th classroom span when there are not enough links.
"""

import re

from bs4 import BeautifulSoup, Tag

from src.timetable.errors import (
    MalformedGroupSuffix,
    MissingFieldError,
    MissingSubjectField,
    MissingTeacherField,
)
from src.timetable.logging import get_logger
from src.timetable.markup import DEFAULT_MARKUP, Markup
from src.timetable.models import GroupedField, Occupant, SingleField, WeekdayField

log = get_logger(__name__)

MAX_GROUP_NUMBER = 255

_GROUP_DIGITS = re.compile(r"[0-9]+")


def _text(element: Tag) -> str:
    """Text of all descendant strings, whitespace collapsed."""
    return " ".join(element.get_text(" ").split())


def _as_fragment(fragment: Tag | str) -> Tag:
    if isinstance(fragment, str):
        return BeautifulSoup(fragment, "html.parser")
    return fragment


def extract_occupant(fragment: Tag | str, markup: Markup = DEFAULT_MARKUP) -> Occupant:
    """Read the subject, teacher and classroom of one occupant.

    Only the first match of each selector counts, so a fragment holding more
    than one occupant yields the first one.

    Args:
        fragment: Element (or markup text) containing one occupant's elements.
        markup: Selector set.

    Raises:
        MissingSubjectField: No subject marker in the fragment.
        MissingTeacherField: No teacher link in the fragment.
    """
    root = _as_fragment(fragment)

    subject = root.select_one(markup.subject)
    if subject is None:
        raise MissingSubjectField(f"No {markup.subject} element in fragment")

    teacher = root.select_one(markup.teacher)
    if teacher is None:
        raise MissingTeacherField(f"No {markup.teacher} element in fragment")

    # Rooms with their own page are links, the rest plain spans
    classroom = root.select_one(markup.classroom_link)
    if classroom is None:
        classroom = root.select_one(markup.classroom_span)

    return Occupant(
        subject=_text(subject),
        teacher=_text(teacher),
        classroom=_text(classroom) if classroom is not None else "",
    )


def resolve_group_number(subject: str) -> tuple[int, str]:
    """Split a group suffix off a subject.

    ``"j.angielski-2/2"`` becomes ``(2, "j.angielski")``. A subject without a
    hyphen belongs to group 0 and is returned unchanged. With several hyphens
    only the last segment is the suffix and the rest is joined back without
    hyphens, untrimmed. The number must be plain ASCII digits.

    Raises:
        MalformedGroupSuffix: The text before ``/`` in the last segment is not
            a group number in 0..255.
    """
    segments = subject.split("-")
    if len(segments) < 2:
        return 0, subject

    suffix = segments[-1]
    head = suffix.split("/")[0]
    if not _GROUP_DIGITS.fullmatch(head):
        raise MalformedGroupSuffix(subject, suffix)
    number = int(head)
    if number > MAX_GROUP_NUMBER:
        raise MalformedGroupSuffix(subject, suffix)

    return number, "".join(segments[:-1])


def _wrapper(cell: Tag, marker: Tag, markup: Markup) -> Tag | None:
    """Return the element wrapping one whole group, if the marker has one.

    A wrapper is the marker's parent when that parent is not the cell, is not
    itself an occupant part, and holds exactly this subject plus a teacher.
    """
    parent = marker.parent
    if parent is None or parent is cell:
        return None
    if any(parent.css.match(selector) for selector in markup.occupant_parts):
        return None
    if len(parent.select(markup.subject)) != 1:
        return None
    if parent.select_one(markup.teacher) is None:
        return None
    return parent


def _reassemble(
    marker: Tag,
    index: int,
    teachers: list[Tag],
    classroom_links: list[Tag],
    classroom_spans: list[Tag],
) -> str:
    """Concatenate the index-th subject, teacher and classroom into one fragment.

    The classroom is the index-th link, else the index-th span, else nothing.
    """
    if index >= len(teachers):
        raise MissingTeacherField(
            f"No teacher link at position {index}, cell has {len(teachers)}"
        )

    parts = [str(marker), str(teachers[index])]
    if index < len(classroom_links):
        parts.append(str(classroom_links[index]))
    elif index < len(classroom_spans):
        parts.append(str(classroom_spans[index]))
    return "".join(parts)


def _parse_groups(cell: Tag, markers: list[Tag], markup: Markup) -> GroupedField | None:
    teachers = cell.select(markup.teacher)
    classroom_links = cell.select(markup.classroom_link)
    classroom_spans = cell.select(markup.classroom_span)

    if len(teachers) != len(markers):
        log.warning(
            "group_count_mismatch",
            subjects=len(markers),
            teachers=len(teachers),
        )

    groups: dict[int, Occupant] = {}
    for index, marker in enumerate(markers):
        try:
            wrapper = _wrapper(cell, marker, markup)
            if wrapper is not None:
                occupant = extract_occupant(wrapper, markup)
            else:
                fragment = _reassemble(
                    marker, index, teachers, classroom_links, classroom_spans
                )
                occupant = extract_occupant(fragment, markup)
        except MissingFieldError as e:
            log.warning("group_skipped", index=index, reason=str(e))
            continue

        try:
            number, subject = resolve_group_number(occupant.subject)
        except MalformedGroupSuffix as e:
            log.warning("group_suffix_malformed", subject=e.subject, suffix=e.suffix)
            number = 0
        else:
            occupant = occupant.model_copy(update={"subject": subject})

        if number in groups:
            log.debug("group_replaced", group=number, index=index)
        groups[number] = occupant

    if not groups:
        log.warning("cell_demoted", reason="no_parsable_group", subjects=len(markers))
        return None
    return GroupedField(groups)


def parse_cell(cell: Tag, markup: Markup = DEFAULT_MARKUP) -> WeekdayField:
    """Parse one weekday cell.

    Returns:
        None for an empty cell, SingleField for one subject marker, or
        GroupedField for two or more. Occupants that cannot be read are
        dropped with a warning instead of failing the cell.
    """
    text = cell.get_text(" ", strip=True)
    if not text or text == markup.empty_marker:
        return None

    markers = cell.select(markup.subject)
    if not markers:
        log.debug("cell_without_subject", text=text)
        return None

    if len(markers) == 1:
        try:
            return SingleField(extract_occupant(cell, markup))
        except MissingFieldError as e:
            log.warning("cell_demoted", reason=str(e))
            return None

    return _parse_groups(cell, markers, markup)
