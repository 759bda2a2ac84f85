"""Process-wide logging setup.

Every record reports its caller so a log line can be traced back to the
exact function that emitted it:

    2026-10-17 12:00:00,000 INFO cb.request [request_log.dispatch:38] [GET] /account/coins → 200 (1003ms) req_1a2b3c4d5e6f
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s [%(module)s.%(funcName)s:%(lineno)d] %(message)s"

_HANDLER_NAME = "cb.stream"


def configure_logging(level: str | int = "INFO") -> None:
    """Attach a single stdout handler to the root logger.

    Safe to call repeatedly (reload, tests): the handler is only added once,
    later calls just update the level.
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    root = logging.getLogger()
    root.setLevel(level)
    if any(h.get_name() == _HANDLER_NAME for h in root.handlers):
        return

    handler = logging.StreamHandler(stream=sys.stdout)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
