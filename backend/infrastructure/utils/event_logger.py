import logging
import time
from typing import Any, Dict, Optional

from infrastructure.utils.log_format import format_kv


class EventLogger:
    """
    Emits single-line `<prefix> seq=.. event=".." ...` logs for one operation.

    Shared fields (e.g. storage key, backend) are given once and repeated on every
    line together with a sequence number and the elapsed time since creation.
    """

    def __init__(
        self,
        logger: logging.Logger,
        prefix: str,
        *,
        base_fields: Optional[Dict[str, Any]] = None,
        started_at: Optional[float] = None,
        stacklevel: int = 3,
    ) -> None:
        self._logger = logger
        self._prefix = prefix
        self._base_fields: Dict[str, Any] = dict(base_fields or {})
        self._started_at = started_at if started_at is not None else time.monotonic()
        self._seq = 0
        self._stacklevel = stacklevel

    def set(self, **fields: Any) -> None:
        self._base_fields.update({k: v for k, v in fields.items() if v is not None})

    def info(self, event: str, **fields: Any) -> None:
        self._log(logging.INFO, event, **fields)

    def debug(self, event: str, **fields: Any) -> None:
        self._log(logging.DEBUG, event, **fields)

    def warning(self, event: str, **fields: Any) -> None:
        self._log(logging.WARNING, event, **fields)

    def exception(self, event: str, **fields: Any) -> None:
        """ERROR level, with the current exception's traceback."""
        self._log(logging.ERROR, event, exc_info=True, **fields)

    def _log(self, level: int, event: str, exc_info: bool = False, **fields: Any) -> None:
        self._seq += 1
        payload: Dict[str, Any] = {
            "seq": self._seq,
            "event": event,
            "elapsed_seconds": round(time.monotonic() - self._started_at, 4),
        }
        payload.update(self._base_fields)
        payload.update(fields)

        self._logger.log(
            level,
            "%s %s",
            self._prefix,
            format_kv(**payload),
            exc_info=exc_info,
            stacklevel=self._stacklevel,
        )
