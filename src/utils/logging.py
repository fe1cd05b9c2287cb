from __future__ import annotations

import logging
import sys
import time
import uuid
from contextvars import ContextVar

# Set once per projection run; stamped on every record emitted during it.
run_id_var: ContextVar[str] = ContextVar("run_id", default="-")
source_var: ContextVar[str] = ContextVar("source", default="-")

LOG_FORMAT = "%(asctime)s level=%(levelname)s logger=%(name)s run_id=%(run_id)s source=%(source)s msg=%(message)s"


class RunContextFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.run_id = run_id_var.get()
        record.source = source_var.get()
        return True


def setup_logging(level: str = "INFO") -> None:
    lvl = getattr(logging, level.upper(), logging.INFO)
    root = logging.getLogger()
    root.setLevel(lvl)

    # Replace handlers (avoid duplicate logs in Streamlit reloads)
    root.handlers = []

    formatter = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%dT%H:%M:%SZ")
    formatter.converter = time.gmtime

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(lvl)
    handler.addFilter(RunContextFilter())
    handler.setFormatter(formatter)

    root.addHandler(handler)


def start_run(source: str) -> str:
    """Tag subsequent records with a fresh run id and the calling surface ("web", "cli")."""
    run_id = uuid.uuid4().hex[:12]
    run_id_var.set(run_id)
    source_var.set(source)
    return run_id


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
