"""Error hierarchy for timetable fetching and extraction.

Retry decorators use the split between transient failures (network, 5xx) and
permanent ones (bad identifier, unexpected markup) to decide what to retry.
Extraction errors are all permanent: parsing the same document again gives the
same result.

Example usage with tenacity:
    @retry(retry=retry_if_exception_type(TransientError), stop=stop_after_attempt(3))
    def fetch_html(url: str) -> bytes:
        ...
"""


class ScrapingError(Exception):
    """Base exception for all timetable errors."""

    pass


class TransientError(ScrapingError):
    """Temporary failure that may succeed on retry.

    Examples: connection refused, read timeout, 503 Service Unavailable.
    """

    pass


class RateLimitError(TransientError):
    """Upstream answered 429 Too Many Requests."""

    pass


class PermanentError(ScrapingError):
    """Failure that won't succeed on retry."""

    pass


class DocumentNotFound(PermanentError):
    """Upstream answered 404: the timetable or listing page does not exist."""

    pass


class InvalidScheduleId(PermanentError):
    """Timetable identifier contains characters not allowed in a page name."""

    pass


class MissingTimetable(PermanentError):
    """The document has no timetable table (``table.tabela``).

    Fatal for the whole extraction: no partial schedule is produced.
    """

    pass


class MissingCatalog(PermanentError):
    """The class listing page has no table of timetable links."""

    pass


class IncompleteRow(PermanentError):
    """A time-labelled row has fewer than five weekday cells."""

    def __init__(self, time: str, found: int) -> None:
        super().__init__(f"Row {time!r} has {found} day cells, expected 5")
        self.time = time
        self.found = found


class MissingFieldError(PermanentError):
    """An occupant fragment lacks a required element."""

    pass


class MissingSubjectField(MissingFieldError):
    """No subject marker in an occupant fragment."""

    pass


class MissingTeacherField(MissingFieldError):
    """No teacher link in an occupant fragment."""

    pass


class MalformedGroupSuffix(PermanentError):
    """Subject ends in a group suffix whose number does not parse."""

    def __init__(self, subject: str, suffix: str) -> None:
        super().__init__(f"Malformed group suffix {suffix!r} in subject {subject!r}")
        self.subject = subject
        self.suffix = suffix
