import base64
import binascii
import json
from typing import Any, Dict, NoReturn

from pydantic import ValidationError

from .exceptions import ClientError
from .schemas import DecodedEvent

INVALID_MESSAGE_FORMAT = "invalid message format"

def _reject_constant(name: str) -> NoReturn:
    # NaN / Infinity / -Infinity are not JSON
    raise ValueError(f"non-standard JSON constant: {name}")

def decode_event(data: str) -> DecodedEvent:
    """
    base64 -> UTF-8 -> JSON object. Anything else is a ClientError so the push
    subscription drops the message instead of redelivering it.
    """
    try:
        raw = base64.b64decode(data, validate=True)
        parsed = json.loads(raw.decode("utf-8"), parse_constant=_reject_constant)
    except (binascii.Error, ValueError, RecursionError) as e:
        raise ClientError(INVALID_MESSAGE_FORMAT) from e

    # null, scalars and arrays are not events
    if not isinstance(parsed, dict):
        raise ClientError(INVALID_MESSAGE_FORMAT)

    try:
        return DecodedEvent.model_validate(parsed)
    except (ValidationError, RecursionError) as e:
        raise ClientError(INVALID_MESSAGE_FORMAT) from e

def encode_event(payload: Dict[str, Any]) -> str:
    return base64.b64encode(json.dumps(payload).encode("utf-8")).decode("ascii")
