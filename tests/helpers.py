"""Markup builders for tests."""

from bs4 import BeautifulSoup, Tag


def make_cell(inner: str) -> Tag:
    """Build a ``td.l`` element from its inner markup."""
    soup = BeautifulSoup(
        f'<table><tr><td class="l">{inner}</td></tr></table>', "html.parser"
    )
    return soup.select_one("td.l")


def make_row(time: str, *cells: str) -> str:
    tds = "".join(f'<td class="l">{cell}</td>' for cell in cells)
    return f'<tr><td class="nr">1</td><td class="g">{time}</td>{tds}</tr>'


def make_document(*rows: str, table_class: str = "tabela") -> str:
    """Wrap row markup into a minimal timetable page."""
    body = "\n".join(rows)
    return f'<html><body><table class="{table_class}">{body}</table></body></html>'


def occupant_markup(
    subject: str, teacher: str, classroom: str = "", room_link: bool = True
) -> str:
    parts = [
        f'<span class="p">{subject}</span>',
        f'<a href="n1.html" class="n">{teacher}</a>',
    ]
    if classroom and room_link:
        parts.append(f'<a href="s1.html" class="s">{classroom}</a>')
    elif classroom:
        parts.append(f'<span class="s">{classroom}</span>')
    return " ".join(parts)


EMPTY = "&nbsp;"
