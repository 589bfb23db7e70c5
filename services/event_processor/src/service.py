from typing import Any, Dict

from pydantic import ValidationError

from .decoder import decode_event
from .exceptions import ClientError, ProcessingError
from .handlers import HANDLERS, handle_unknown_event
from .logging import JsonLogger
from .schemas import DecodedEvent, HandlerResult, PubSubEnvelope

def parse_envelope(body: Any) -> PubSubEnvelope:
    try:
        return PubSubEnvelope.model_validate(body)
    except ValidationError as e:
        raise ClientError(f"invalid envelope: {e.error_count()} validation error(s)") from e

def dispatch(decoded: DecodedEvent, log: JsonLogger) -> HandlerResult:
    event_type = decoded.event
    log(event="handling_event", event_type=event_type)

    handler = HANDLERS.get(event_type) if isinstance(event_type, str) else None
    if handler is None:
        return handle_unknown_event(event_type, log)
    return handler(decoded.data, log)

def process_event(envelope: PubSubEnvelope, log: JsonLogger) -> Dict[str, Any]:
    """
    Decode the push message and route it to its handler.
    ClientError propagates untouched; anything raised past decoding becomes a ProcessingError.
    """
    message = envelope.message
    decoded = decode_event(message.data)

    log(
        event="processing_event",
        publish_time=message.publish_time,
        subscription=envelope.subscription,
        event_type=decoded.event,
        event_data=decoded.data,
    )

    try:
        result = dispatch(decoded, log)
    except Exception as e:
        raise ProcessingError(f"handler failed for event type {decoded.event!r}: {e}") from e

    return result.model_dump(by_alias=True)
