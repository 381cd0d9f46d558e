"""Logging for setup runs.

Package modules log through stdlib ``logging.getLogger(__name__)``; structlog
renders those records and its own on stderr, keeping stdout free for
results. While a run is in progress two scopes are bound via contextvars:

- ``feature``: the feature whose setup is executing
- ``command``: the shell command currently running

JSON logs (``--log-json``) carry both as keys. Console logs fold the feature
into a ``[name]`` prefix on the event so interleaved npm noise stays
attributable.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import structlog

PACKAGE_LOGGER = "scaffoldctl"


@contextmanager
def feature_scope(name: str) -> Iterator[None]:
    """Tag every record emitted inside the block with ``feature=name``."""
    with structlog.contextvars.bound_contextvars(feature=name):
        yield


@contextmanager
def command_scope(command: str) -> Iterator[None]:
    """Tag every record emitted inside the block with ``command=command``."""
    with structlog.contextvars.bound_contextvars(command=command):
        yield


def _prefix_feature(_logger: Any, _method: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    feature = event_dict.pop("feature", None)
    if feature:
        event_dict["event"] = f"[{feature}] {event_dict.get('event', '')}"
    return event_dict


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route package and structlog records to a single stderr handler.

    Package loggers log at DEBUG with ``verbose`` and WARNING otherwise.
    Third-party loggers stay at WARNING either way.
    """
    shared: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
    ]
    if log_json:
        shared.append(structlog.processors.TimeStamper(fmt="iso"))
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        shared.append(_prefix_feature)
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)
    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
