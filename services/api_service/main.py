from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .src.routers import api, health, hello
from .src.config import settings
from .src.logging import JsonLogger, configure_logging
from .otel import init_tracing

configure_logging(settings.log_level)

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    log = JsonLogger(settings.service_name, settings.environment)
    log(event="startup", port=settings.port, environment=settings.environment, cors_enabled=settings.cors_enabled)
    try:
        yield
    finally:
        log(event="shutdown")

app = FastAPI(title="API Service", version="1.0.0", lifespan=lifespan)

if settings.cors_enabled:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

# Routers
app.include_router(hello.router)
app.include_router(api.router, prefix="/api")
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
