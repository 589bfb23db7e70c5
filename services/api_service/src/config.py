from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Any, Dict, Literal, Optional

# -----------------------
# Settings and constants
# -----------------------

class DatabaseConfig(BaseModel):
    type: str = "postgres"
    host: str
    port: int
    username: str
    password: str
    database: str
    synchronize: bool = False  # schema changes go through migrations
    logging: bool = False
    ssl: Optional[Dict[str, Any]] = None
    pool_size: int = 10
    connect_timeout_s: float = 5.0
    idle_timeout_s: float = 30.0

class Settings(BaseSettings):

    # Core
    service_name: str = "api-service"
    environment: str = "development"
    port: int = 3000
    log_level: str = "INFO"
    cors_enabled: bool = True

    # Tracing: "cloud_trace" in Cloud Run, "console" for local debugging
    otel_exporter: Literal["none", "console", "cloud_trace"] = "none"

    # Database
    db_host: str = "localhost"
    db_port: int = 5432
    db_user: str = "postgres"
    db_password: str = "postgres"
    db_name: str = "api_dev"
    db_ssl: bool = False
    db_pool_size: int = 10

    # Global settings configuration (Pydantic v2)
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    def database_config(self) -> DatabaseConfig:
        return DatabaseConfig(
            host=self.db_host,
            port=self.db_port,
            username=self.db_user,
            password=self.db_password,
            database=self.db_name,
            logging=self.environment == "development",
            ssl={"rejectUnauthorized": False} if self.db_ssl else None,
            pool_size=self.db_pool_size,
        )

settings = Settings()
