#!/usr/bin/env python3
"""Run the timetable JSON service.

Listens on HOST:PORT from the environment (default 0.0.0.0:3000).

Usage:
    python scripts/serve.py
    PORT=8080 LOG_JSON=true python scripts/serve.py
"""

import argparse
import os
import sys

from dotenv import load_dotenv

load_dotenv()

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from src.timetable.config import get_config  # noqa: E402
from src.timetable.logging import setup_logging  # noqa: E402
from src.timetable.server import serve  # noqa: E402


def main() -> None:
    parser = argparse.ArgumentParser(description="Serve timetables as JSON")
    parser.add_argument("--host", default=None, help="Bind address (overrides HOST)")
    parser.add_argument("--port", type=int, default=None, help="Port (overrides PORT)")
    args = parser.parse_args()

    config = get_config()
    overrides = {
        key: value
        for key, value in (("host", args.host), ("port", args.port))
        if value is not None
    }
    if overrides:
        config = config.model_copy(update=overrides)

    setup_logging(json_output=config.log_json, log_level=config.log_level)
    serve(config)


if __name__ == "__main__":
    main()
