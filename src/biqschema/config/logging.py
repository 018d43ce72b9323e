"""structlog output for applications that embed biqschema.

biqschema never configures logging on import; its modules write to stdlib
loggers under ``biqschema`` and stay silent unless the host opts in. A host
that wants those records (a decode failure, an unknown limit code) rendered
as structured events calls :func:`configure_logging` once at start-up.

Only the ``biqschema`` logger tree is touched. The host's root logger, its
handlers and its levels are left alone, and ``biqschema`` records stop
propagating so they are not printed twice.

Two output modes:
- Human (default): console-rendered lines
- JSON (``log_json=True``): one JSON object per line, tracebacks as dicts
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog

_HANDLER_NAME = "biqschema.structlog"


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    stream: TextIO | None = None,
) -> None:
    """Route ``biqschema`` log records through structlog.

    Safe to call again; the previous biqschema handler is replaced.

    Args:
        verbose: Emit DEBUG records (every decode failure). When False, only WARNING+.
        log_json: Use JSON renderer instead of console renderer.
        stream: Where to write; defaults to ``sys.stderr``.
    """
    out = stream or sys.stderr

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.ExtraAdder(),
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    render_chain: list[structlog.types.Processor]
    if log_json:
        render_chain = [
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ]
    else:
        render_chain = [structlog.dev.ConsoleRenderer(colors=out.isatty())]

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            *render_chain,
        ],
    )

    handler = logging.StreamHandler(out)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(formatter)

    biq_logger = logging.getLogger("biqschema")
    for existing in [h for h in biq_logger.handlers if h.get_name() == _HANDLER_NAME]:
        biq_logger.removeHandler(existing)
    biq_logger.addHandler(handler)
    biq_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    biq_logger.propagate = False
