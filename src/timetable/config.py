"""Timetable service configuration loaded from environment variables."""

from pydantic import Field
from pydantic_settings import BaseSettings


class TimetableConfig(BaseSettings):
    """Settings for fetching timetables and serving them over HTTP.

    Loaded from environment variables with defaults pointing at the ZSEM
    timetable site. For local development, create a .env file in the project
    root.
    """

    # Timetable site layout: {base_url}/{schedule_path}/{id}{schedule_suffix}
    base_url: str = Field(
        default="https://zsem.edu.pl/plany",
        description="Root URL of the published timetables",
    )
    classes_path: str = Field(
        default="lll.php",
        description="Class listing page, relative to base_url",
    )
    schedule_path: str = Field(
        default="plany",
        description="Directory holding one page per timetable, relative to base_url",
    )
    schedule_suffix: str = Field(
        default=".html",
        description="File extension of a timetable page",
    )
    practice_postfix: str = Field(
        default="prakt.",
        description="Marker appended to class names that are on work placement",
    )

    # HTTP client
    request_timeout: float = Field(
        default=30.0,
        description="Timeout in seconds for a single page download",
    )
    max_retries: int = Field(
        default=3,
        description="Attempts per download before a transient failure is surfaced",
    )
    user_agent: str = Field(
        default="zsem-timetable/0.1",
        description="User-Agent header sent to the timetable site",
    )

    # HTTP service
    host: str = Field(default="0.0.0.0", description="Address the service binds to")
    port: int = Field(default=3000, description="Port the service listens on")

    # Logging
    log_json: bool = Field(
        default=False,
        description="Output logs in JSON format (for production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    model_config = {
        "env_prefix": "",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @property
    def classes_url(self) -> str:
        return f"{self.base_url}/{self.classes_path}"


_config: TimetableConfig | None = None


def get_config() -> TimetableConfig:
    """Get the configuration singleton."""
    global _config
    if _config is None:
        _config = TimetableConfig()
    return _config
