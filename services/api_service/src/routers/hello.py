from typing import Any

from fastapi import APIRouter, Body, Depends, status

from ..dependencies import get_logger
from ..logging import JsonLogger
from ..schemas import HelloResponse
from ..service import APP_MESSAGE, HELLO_MESSAGE, get_hello, post_hello

# "/" and "/hello" answer the same way with different messages
router = APIRouter()

@router.get("/", response_model=HelloResponse, response_model_exclude_unset=True)
def root_get() -> HelloResponse:
    return get_hello(APP_MESSAGE)

@router.post(
    "/",
    response_model=HelloResponse,
    response_model_exclude_unset=True,
    status_code=status.HTTP_200_OK,
)
def root_post(
    body: Any = Body(default=None),
    log: JsonLogger = Depends(get_logger),
) -> HelloResponse:
    log(event="hello_post", body_type=type(body).__name__)
    return post_hello(APP_MESSAGE, body)

@router.get("/hello", response_model=HelloResponse, response_model_exclude_unset=True)
def hello_get() -> HelloResponse:
    return get_hello(HELLO_MESSAGE)

@router.post(
    "/hello",
    response_model=HelloResponse,
    response_model_exclude_unset=True,
    status_code=status.HTTP_200_OK,
)
def hello_post(
    body: Any = Body(default=None),
    log: JsonLogger = Depends(get_logger),
) -> HelloResponse:
    log(event="hello_post", body_type=type(body).__name__)
    return post_hello(HELLO_MESSAGE, body)
