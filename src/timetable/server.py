"""JSON HTTP service exposing the class catalog and timetables.

Routes:
    GET /class/list             -> [ClassEntry, ...]
    GET /schedule/<id>          -> Schedule (list of rows)
    GET /health                 -> "ok"

Errors are returned as {"error": <kind>, "message": <text>}. A page without a
timetable is an error (502), never an empty schedule.
"""

import json
from http import HTTPStatus
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from urllib.parse import unquote, urlsplit

from pydantic import TypeAdapter

from src.timetable import service
from src.timetable.config import TimetableConfig
from src.timetable.errors import (
    DocumentNotFound,
    InvalidScheduleId,
    MissingCatalog,
    MissingTimetable,
    ScrapingError,
    TransientError,
)
from src.timetable.logging import get_logger
from src.timetable.models import ClassEntry

log = get_logger(__name__)

_CLASS_LIST = TypeAdapter(list[ClassEntry])
SCHEDULE_PREFIX = "/schedule/"


def error_status(exc: ScrapingError) -> tuple[HTTPStatus, str]:
    """Map an error onto the HTTP status and error kind sent to clients."""
    if isinstance(exc, InvalidScheduleId):
        return HTTPStatus.BAD_REQUEST, "invalid_schedule_id"
    if isinstance(exc, DocumentNotFound):
        return HTTPStatus.NOT_FOUND, "not_found"
    if isinstance(exc, (MissingTimetable, MissingCatalog)):
        return HTTPStatus.BAD_GATEWAY, "unrecognized_document"
    if isinstance(exc, TransientError):
        return HTTPStatus.SERVICE_UNAVAILABLE, "upstream_unavailable"
    return HTTPStatus.INTERNAL_SERVER_ERROR, "scraping_error"


class TimetableServer(ThreadingHTTPServer):
    daemon_threads = True

    def __init__(self, address: tuple[str, int], config: TimetableConfig) -> None:
        super().__init__(address, TimetableHandler)
        self.config = config


class TimetableHandler(BaseHTTPRequestHandler):
    server: TimetableServer

    def do_GET(self):
        path = urlsplit(self.path).path

        if path == "/health":
            self._send(HTTPStatus.OK, b"ok", "text/plain")
            return

        try:
            if path == "/class/list":
                classes = service.get_classes(self.server.config)
                self._send(HTTPStatus.OK, _CLASS_LIST.dump_json(classes))
                return
            if path.startswith(SCHEDULE_PREFIX):
                schedule_id = unquote(path[len(SCHEDULE_PREFIX):])
                schedule = service.get_schedule(schedule_id, self.server.config)
                self._send(HTTPStatus.OK, schedule.model_dump_json().encode())
                return
        except ScrapingError as e:
            status, kind = error_status(e)
            log.warning("request_failed", path=path, status=int(status), error=str(e))
            self._send_error(status, kind, str(e))
            return

        self._send_error(HTTPStatus.NOT_FOUND, "not_found", f"No route for {path}")

    def _send_error(self, status: HTTPStatus, kind: str, message: str) -> None:
        body = json.dumps({"error": kind, "message": message}).encode()
        self._send(status, body)

    def _send(
        self, status: HTTPStatus, body: bytes, content_type: str = "application/json"
    ) -> None:
        self.send_response(status)
        self.send_header("Content-Type", content_type)
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format, *args):
        log.info("http_request", client=self.address_string(), request=format % args)


def make_server(config: TimetableConfig) -> TimetableServer:
    return TimetableServer((config.host, config.port), config)


def serve(config: TimetableConfig) -> None:
    """Run the service until interrupted."""
    server = make_server(config)
    log.info("server_listening", host=config.host, port=config.port)
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        log.info("server_stopping")
    finally:
        server.server_close()
