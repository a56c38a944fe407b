"""ClassesPage - lists the available class timetables.

The listing page (lll.php) holds one table of links targeting the plan frame:
    <a href="plany/o29.html" target="plan">3 TI prakt.</a>
"""

from bs4 import BeautifulSoup

from src.timetable.errors import MissingCatalog
from src.timetable.logging import get_logger
from src.timetable.models import ClassEntry

log = get_logger(__name__)


class ClassesPage:
    """Class listing page at {base_url}/lll.php."""

    TABLE = "table"
    PLAN_LINK = "a[target=plan]"

    def __init__(self, practice_postfix: str = "prakt.") -> None:
        self.practice_postfix = practice_postfix

    def extract(self, html: str | bytes, base_url: str) -> list[ClassEntry]:
        """Extract the class catalog.

        Args:
            html: Listing page markup.
            base_url: Root URL the link hrefs are relative to.

        Returns:
            ClassEntry per plan link, in page order.

        Raises:
            MissingCatalog: The page has no table.
        """
        document = BeautifulSoup(html, "html.parser")
        table = document.select_one(self.TABLE)
        if table is None:
            raise MissingCatalog("No table element in class listing")

        classes: list[ClassEntry] = []
        for link in table.select(self.PLAN_LINK):
            href = link.get("href")
            if not href:
                log.warning("class_link_without_href", text=link.get_text(strip=True))
                continue

            # plany/o29.html -> o29
            class_id = href.rsplit("/", 1)[-1].split(".")[0]
            name = link.get_text(" ")
            is_on_practice = self.practice_postfix in name
            name = " ".join(name.replace(self.practice_postfix, "").split())

            classes.append(
                ClassEntry(
                    id=class_id,
                    name=name,
                    url=f"{base_url}/{href}",
                    is_on_practice=is_on_practice,
                )
            )

        log.info("classes_extracted", count=len(classes))
        return classes
