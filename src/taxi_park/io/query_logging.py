# io/query_logging.py
import json
import logging
import sys
from collections.abc import Collection

from taxi_park.app.hooks import NoopHooks


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "msg": record.getMessage(),
            "logger": record.name,
        }
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            payload.update(extra)
        return json.dumps(payload, default=str)


def _default_json_logger(name="taxi_park", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stdout)
        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
    logger.setLevel(level)
    return logger


def _summarize(result):
    # sets of entities can be large; log their size and a sorted sample
    if isinstance(result, range):
        return {"bin": [result.start, result.stop - 1]}
    if isinstance(result, Collection) and not isinstance(result, str):
        names = sorted(str(x) for x in result)
        return {"size": len(names), "sample": names[:10]}
    return {"value": result}


class QueryLogging(NoopHooks):
    """
    Structured JSON logs for every query the analytics facade runs.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        logger: logging.Logger | None = None,
    ):
        self.run_id, self.debug = run_id, debug
        self.log = logger or _default_json_logger(level=level)

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id, **extra}
        self.log.log(getattr(logging, level), msg, extra={"extra": payload})

    def query_start(self, name: str, **params):
        if self.debug:
            self._emit("DEBUG", "query_start", query=name, **params)

    def query_end(self, name: str, *, result, wall_ms: float, **params):
        summary = _summarize(result)
        self._emit("INFO", "query_end", query=name, wall_ms=round(wall_ms, 3), **params, **summary)

    def error(self, name: str, *, exc: BaseException, **params):
        self._emit("ERROR", "query_error", query=name, error=str(exc), **params)
