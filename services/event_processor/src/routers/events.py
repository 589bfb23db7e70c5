import time
import traceback
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import JSONResponse

from ..dependencies import get_logger
from ..exceptions import ClientError
from ..logging import JsonLogger
from ..schemas import EventResponse
from ..service import parse_envelope, process_event

router = APIRouter()

def _elapsed_ms(start: float) -> int:
    return int((time.perf_counter() - start) * 1000)

@router.post("/events", response_model=EventResponse, response_model_by_alias=True)
async def handle_event(
    request: Request,
    log: JsonLogger = Depends(get_logger),
) -> Dict[str, Any]:
    """
    Pub/Sub push endpoint.
    400 -> malformed envelope/payload (dropped), 500 -> unexpected failure (redelivered), 200 -> ack.
    """
    start = time.perf_counter()
    try:
        body = await request.json()
    except ValueError as e:
        log(event="envelope_rejected", severity="ERROR", error="body is not JSON", duration_ms=_elapsed_ms(start))
        raise HTTPException(status_code=400, detail="request body is not valid JSON") from e

    try:
        envelope = parse_envelope(body)
    except ClientError as e:
        log(event="envelope_rejected", severity="ERROR", error=str(e), duration_ms=_elapsed_ms(start))
        raise HTTPException(status_code=400, detail=str(e)) from e

    message_id = envelope.message.message_id
    log = log.bind(message_id=message_id)
    log(
        event="pubsub_message_received",
        publish_time=envelope.message.publish_time,
        delivery_attempt=request.headers.get("X-Goog-Delivery-Attempt"),
    )

    try:
        result = process_event(envelope, log)
    except ClientError as e:
        log(event="event_failed", severity="ERROR", retryable=False, error=str(e), duration_ms=_elapsed_ms(start))
        raise HTTPException(status_code=400, detail=str(e)) from e
    except Exception as e:
        # ProcessingError or anything unforeseen: let Pub/Sub redeliver
        duration = _elapsed_ms(start)
        log(
            event="event_failed",
            severity="ERROR",
            retryable=True,
            error=str(e),
            stack=traceback.format_exc(),
            duration_ms=duration,
        )
        return JSONResponse(
            status_code=500,
            content={
                "success": False,
                "messageId": message_id,
                "error": "Failed to process event",
                "processingTime": f"{duration}ms",
            },
        )

    duration = _elapsed_ms(start)
    log(event="event_processed", duration_ms=duration)
    return {
        "success": True,
        "messageId": message_id,
        "result": result,
        "processingTime": f"{duration}ms",
    }
