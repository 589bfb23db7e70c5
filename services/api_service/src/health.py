from datetime import datetime, timezone
from typing import Any, Dict

import anyio
import asyncpg

from .config import DatabaseConfig
from .logging import JsonLogger

VERSION = "1.0.0"
PING_TIMEOUT_S = 5.0

def _utcnow() -> str:
    return datetime.now(timezone.utc).isoformat()

async def ping_database(db: DatabaseConfig, timeout_s: float = PING_TIMEOUT_S) -> None:
    """Open a connection, run SELECT 1, close it. Bounded by timeout_s overall."""
    with anyio.fail_after(timeout_s):
        conn = await asyncpg.connect(
            host=db.host,
            port=db.port,
            user=db.username,
            password=db.password,
            database=db.database,
            ssl="require" if db.ssl else False,
            timeout=db.connect_timeout_s,
        )
        try:
            await conn.fetchval("SELECT 1")
        finally:
            await conn.close()

async def check_health(db: DatabaseConfig, log: JsonLogger, timeout_s: float = PING_TIMEOUT_S) -> Dict[str, Any]:
    try:
        await ping_database(db, timeout_s)
    except Exception as e:
        log(event="health_check_failed", severity="ERROR", host=db.host, error=str(e) or type(e).__name__)
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
