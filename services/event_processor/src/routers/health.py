from typing import Any, Dict

from fastapi import APIRouter, Depends

from ..config import Settings
from ..dependencies import get_logger, get_settings
from ..health import check_health
from ..logging import JsonLogger

router = APIRouter()

@router.get("/health")
async def health(
    cfg: Settings = Depends(get_settings),
    log: JsonLogger = Depends(get_logger),
) -> Dict[str, Any]:
    return await check_health(cfg, log)
