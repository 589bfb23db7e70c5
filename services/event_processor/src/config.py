from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Literal

# -----------------------
# Settings and constants
# -----------------------

class Settings(BaseSettings):

    # Core
    service_name: str = "event-processor"
    environment: str = "development"
    port: int = 8080
    log_level: str = "INFO"

    # Tracing: "cloud_trace" in Cloud Run, "console" for local debugging
    otel_exporter: Literal["none", "console", "cloud_trace"] = "none"

    # Database (health ping only; the event path never touches it)
    db_host: str = "localhost"
    db_port: int = 5432
    db_user: str = "postgres"
    db_password: str = "postgres"
    db_name: str = "events_dev"
    db_ssl: bool = False
    health_ping_timeout_s: float = 5.0

    # Global settings configuration (Pydantic v2)
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

settings = Settings()
