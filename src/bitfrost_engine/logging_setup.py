"""Root logger configuration for the API server and dashboard."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s - %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger with a single stderr handler.

    Existing handlers are removed first so repeated calls (Streamlit reruns,
    uvicorn reload) do not duplicate output.  Unknown level names fall back
    to INFO.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    for handler in root.handlers[:]:
        root.removeHandler(handler)

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(console)
