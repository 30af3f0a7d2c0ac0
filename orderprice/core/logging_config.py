# orderprice/core/logging_config.py
import logging
import sys

import structlog


def setup_logging(level: str = "INFO", json: bool = True) -> None:
    """
    Configure structlog + standard logging.
    Logs go to stdout, as JSON unless json=False (then human readable).
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level.upper(), logging.INFO),
        force=True,
    )

    renderer = structlog.processors.JSONRenderer() if json else structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


# Global logger, import it anywhere. Backed by stdlib logging so a host
# that never calls setup_logging gets no output (root level WARNING).
logger = structlog.wrap_logger(
    logging.getLogger("orderprice"),
    wrapper_class=structlog.stdlib.BoundLogger,
)
