from datetime import datetime, timezone
from typing import Callable, Dict, Optional

from pydantic import JsonValue

from .logging import JsonLogger
from .schemas import HandlerResult

Handler = Callable[[JsonValue, JsonLogger], HandlerResult]

def _utcnow() -> str:
    return datetime.now(timezone.utc).isoformat()

def _truthy(value: JsonValue) -> bool:
    # JSON-level truthiness: null, false, 0 and "" are falsy; empty containers are not
    if isinstance(value, (list, dict)):
        return True
    return value not in (None, False, 0, "")

def lookup(data: JsonValue, primary: str, fallback: str) -> Optional[JsonValue]:
    """
    Prefer ``data[primary]``; fall back to ``data[fallback]``; None when neither
    is there or ``data`` is not an object.
    """
    if not isinstance(data, dict):
        return None
    value = data.get(primary)
    if _truthy(value):
        return value
    return data.get(fallback)

def handle_user_created(data: JsonValue, log: JsonLogger) -> HandlerResult:
    log(event="user_created", data=data)
    return HandlerResult(
        status="processed",
        event_type="user.created",
        userId=lookup(data, "userId", "id"),
    )

def handle_order_placed(data: JsonValue, log: JsonLogger) -> HandlerResult:
    log(event="order_placed", data=data)
    return HandlerResult(
        status="processed",
        event_type="order.placed",
        orderId=lookup(data, "orderId", "id"),
    )

def handle_test_event(data: JsonValue, log: JsonLogger) -> HandlerResult:
    log(event="test_event", data=data)
    return HandlerResult(status="processed", event_type="test", data=data, timestamp=_utcnow())

def handle_unknown_event(event_type: JsonValue, log: JsonLogger) -> HandlerResult:
    log(event="unknown_event_type", severity="WARNING", event_type=event_type)
    return HandlerResult(
        status="acknowledged",
        event_type=event_type,
        message="Event acknowledged but no handler defined",
    )

# Closed set, exact match on the "event" tag
HANDLERS: Dict[str, Handler] = {
    "user.created": handle_user_created,
    "order.placed": handle_order_placed,
    "test": handle_test_event,
}
