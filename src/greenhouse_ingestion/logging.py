import logging
from typing import Any

PACKAGE_LOGGER = "greenhouse_ingestion"

# Extras attached by IngestionClient to its round-trip records
LOG_EXTRA_FIELDS = (
    "resource",
    "method",
    "url",
    "status",
    "duration_ms",
)


class LogfmtFormatter(logging.Formatter):
    """Render a record as ``key=value`` pairs; absent request extras are skipped."""

    def format(self, record: logging.LogRecord) -> str:
        pairs = [
            ("level", record.levelname.lower()),
            ("logger", record.name),
            ("event", record.getMessage() or None),
        ]
        pairs.extend((key, getattr(record, key, None)) for key in LOG_EXTRA_FIELDS)
        if record.exc_info and record.exc_info[0] is not None:
            pairs.append(("exc_type", record.exc_info[0].__name__))

        return " ".join(
            f"{key}={self._quote(val)}" for key, val in pairs if val is not None
        )

    @staticmethod
    def _quote(val: Any) -> str:
        if isinstance(val, (int, float, bool)):
            return str(val)
        s = str(val)
        if any(ch in s for ch in ' ="'):
            s = '"' + s.replace('"', '\\"') + '"'
        return s


def setup_logging(level: str = "INFO", logger_name: str = PACKAGE_LOGGER) -> logging.Logger:
    """
    Send this package's records to stderr in logfmt.
    Calling again replaces the handler rather than stacking a second one.
    """
    log = logging.getLogger(logger_name)
    for h in list(log.handlers):
        if isinstance(h.formatter, LogfmtFormatter):
            log.removeHandler(h)

    handler = logging.StreamHandler()
    handler.setFormatter(LogfmtFormatter())
    log.addHandler(handler)
    log.setLevel(getattr(logging, level.upper(), logging.INFO))
    return log


__all__ = ["setup_logging", "LogfmtFormatter", "LOG_EXTRA_FIELDS", "PACKAGE_LOGGER"]
