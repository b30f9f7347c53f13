"""
Logging Error Sink

Default error sink: writes reported errors and their context to the
service log.
"""

import logging
from typing import Any, Mapping, Optional

logger = logging.getLogger(__name__)


class LoggingErrorSink:
    """Error sink backed by a logger"""

    def __init__(self, sink_logger: Optional[logging.Logger] = None):
        self.logger = sink_logger or logger

    def notify(self, error: BaseException, context: Mapping[str, Any]) -> None:
        self.logger.error(
            f"{type(error).__name__}: {error} | context={dict(context)}",
            exc_info=(type(error), error, error.__traceback__),
        )


__all__ = ["LoggingErrorSink"]
