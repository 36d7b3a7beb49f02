import logging
import sys

import structlog

DEFAULT_LOG_LEVEL = "INFO"


def configure_logging(level: str = DEFAULT_LOG_LEVEL, log_json: bool = False, stream=sys.stderr):
    """
    Route structlog events through the standard logging module.
    :param level: minimum level of the emitted events, e.g. "DEBUG"
    :param log_json: render events as JSON lines instead of the console format
    :param stream: where the events are written
    """
    logging.basicConfig(level=level.upper(), stream=stream, format="%(message)s", force=True)

    renderer = structlog.processors.JSONRenderer() if log_json else structlog.dev.ConsoleRenderer(colors=False)
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
