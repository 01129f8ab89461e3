"""Log rendering for the CLI: stdlib records formatted by structlog on stderr"""

import logging
import sys

import structlog


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(verbose: bool = False, log_json: bool = False) -> None:
    """Install a single stderr handler on the root logger.

    wikidoc modules log through logging.getLogger(__name__); structlog only
    renders those records. The wikidoc logger runs at DEBUG when verbose,
    otherwise WARNING, so unknown directives and failed articles always show.
    """
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
        ],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _renderer(log_json),
        ],
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(logging.WARNING)
    logging.getLogger("wikidoc").setLevel(logging.DEBUG if verbose else logging.WARNING)
