from datetime import datetime, timezone
from typing import Any, Dict

import anyio
import asyncpg

from .config import Settings
from .logging import JsonLogger

VERSION = "1.0.0"

def _utcnow() -> str:
    return datetime.now(timezone.utc).isoformat()

async def ping_database(cfg: Settings) -> None:
    with anyio.fail_after(cfg.health_ping_timeout_s):
        conn = await asyncpg.connect(
            host=cfg.db_host,
            port=cfg.db_port,
            user=cfg.db_user,
            password=cfg.db_password,
            database=cfg.db_name,
            ssl="require" if cfg.db_ssl else False,
        )
        try:
            await conn.fetchval("SELECT 1")
        finally:
            await conn.close()

async def check_health(cfg: Settings, log: JsonLogger) -> Dict[str, Any]:
    try:
        await ping_database(cfg)
    except Exception as e:
        log(event="health_check_failed", severity="ERROR", error=str(e) or type(e).__name__)
        return {
            "status": "error",
            "info": {"database": {"status": "down"}},
            "timestamp": _utcnow(),
            "version": VERSION,
        }

    up = {"database": {"status": "up"}}
    return {
        "status": "ok",
        "info": up,
        "error": {},
        "details": up,
        "timestamp": _utcnow(),
        "version": VERSION,
    }
