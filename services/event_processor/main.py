from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from .src.routers import events, health
from .src.config import settings
from .src.logging import JsonLogger, configure_logging
from .otel import init_tracing

configure_logging(settings.log_level)

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    log = JsonLogger(settings.service_name, settings.environment)
    log(
        event="startup",
        port=settings.port,
        environment=settings.environment,
        entrypoint="POST /events",
    )
    try:
        yield
    finally:
        log(event="shutdown")

app = FastAPI(title="Event Processor", version="1.0.0", lifespan=lifespan)

# Routers
app.include_router(events.router)
app.include_router(health.router)

tracer = init_tracing(
    app,
    service_name=settings.service_name,
    service_version="v1",
    exporter=settings.otel_exporter,
    environment=settings.environment,
)

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=settings.port)
