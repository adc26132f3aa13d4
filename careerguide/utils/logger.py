# =============================================================================
# careerguide/utils/logger.py — JSON-line logging for the whole package
# =============================================================================
# Call sites log an event name as the message and attach fields via extra=:
#   logger.warning("provider_failed", extra={"provider": "cohere", "error": ...})
# =============================================================================

import json
import logging
import sys

from careerguide.core.config import get_settings

LOGGER_NAME = "careerguide"

# Attributes every LogRecord carries; anything else came in through extra=
_RESERVED = set(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "ts": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "event": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key not in _RESERVED and not key.startswith("_"):
                payload[key] = value
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def _build_logger() -> logging.Logger:
    log = logging.getLogger(LOGGER_NAME)
    if not log.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(JsonFormatter())
        log.addHandler(handler)
    log.setLevel(get_settings().log_level)
    return log


logger = _build_logger()
