"""structlog configuration for rentctl.

Both structlog loggers (services) and stdlib loggers (repositories, init)
funnel through one stderr handler, so stdout stays reserved for results.

Output is either a console rendering (default) or JSON lines
(``--log-json``). ``--verbose`` opens the ``rentctl`` namespace down to
DEBUG; ``--quiet`` closes it to ERROR. Everything else stays at WARNING.
"""

from __future__ import annotations

import logging
import sys

import structlog

# Libraries that chatter at DEBUG when the root logger is opened up.
_QUIET_LIBRARIES = ("asyncio", "babel")


def _rentctl_level(*, verbose: bool, quiet: bool) -> int:
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.ERROR
    return logging.WARNING


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    quiet: bool = False,
) -> None:
    """Route structlog and stdlib logging to stderr.

    Safe to call repeatedly: the root handler is replaced, not stacked.

    Args:
        verbose: Emit ``rentctl`` DEBUG records. Wins over *quiet*.
        log_json: Render JSON lines instead of console text.
        quiet: Only emit ``rentctl`` errors.
    """
    pre_chain: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    renderer: structlog.types.Processor
    if log_json:
        renderer = structlog.processors.JSONRenderer()
        pre_chain.append(structlog.processors.format_exc_info)
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)

    logging.getLogger("rentctl").setLevel(_rentctl_level(verbose=verbose, quiet=quiet))
    for name in _QUIET_LIBRARIES:
        logging.getLogger(name).setLevel(logging.WARNING)
