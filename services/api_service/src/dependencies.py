from fastapi import Request

from .config import Settings, settings
from .logging import JsonLogger

def get_settings() -> Settings:
    return settings

def get_logger(request: Request) -> JsonLogger:
    return JsonLogger(settings.service_name, settings.environment).bind(
        method=request.method, path=request.url.path
    )
