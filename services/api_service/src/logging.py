import json
import logging
import time
from typing import Any, Dict, Optional

from opentelemetry import trace

def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level)

class JsonLogger:
    """JSON log records with trace/span ids; ``bind`` adds fixed fields."""

    def __init__(
        self,
        service: str,
        env: str,
        context: Optional[Dict[str, Any]] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.service = service
        self.env = env
        self.context: Dict[str, Any] = dict(context or {})
        self._logger = logger or logging.getLogger(service)

    def bind(self, **fields: Any) -> "JsonLogger":
        return JsonLogger(self.service, self.env, {**self.context, **fields}, self._logger)

    def __call__(self, event: str = "", severity: str = "INFO", **fields: Any) -> None:
        span = trace.get_current_span()
        ctx = span.get_span_context() if span else None
        trace_id = f"{ctx.trace_id:032x}" if ctx and ctx.trace_id else None
        span_id = f"{ctx.span_id:016x}" if ctx and ctx.span_id else None

        record = {
            "event": event,
            "severity": severity,
            "service": self.service,
            "env": self.env,
            "ts": time.time(),
            "trace_id": trace_id,
            "span_id": span_id,
        }
        record.update(self.context)
        record.update(fields)
        self._logger.log(getattr(logging, severity, logging.INFO), json.dumps(record, ensure_ascii=False, default=str))
