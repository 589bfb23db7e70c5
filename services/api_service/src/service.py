from datetime import datetime, timezone
from typing import Any

from .schemas import GreetingResponse, HelloResponse

APP_MESSAGE = "Hello from the API!"
HELLO_MESSAGE = "Hello World!"

def _utcnow() -> str:
    return datetime.now(timezone.utc).isoformat()

def get_hello(message: str) -> HelloResponse:
    return HelloResponse(message=message, timestamp=_utcnow())

def post_hello(message: str, data: Any) -> HelloResponse:
    # Echo whatever the caller sent back to them
    return HelloResponse(message=message, method="POST", received_data=data, timestamp=_utcnow())

def greet(environment: str) -> GreetingResponse:
    return GreetingResponse(greeting=APP_MESSAGE, timestamp=_utcnow(), environment=environment)
