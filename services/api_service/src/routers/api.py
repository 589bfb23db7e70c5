from fastapi import APIRouter, Depends

from ..config import Settings
from ..dependencies import get_settings
from ..schemas import GreetingResponse
from ..service import greet

router = APIRouter()

@router.get("/greet", response_model=GreetingResponse, summary="Greet the caller")
def greet_caller(cfg: Settings = Depends(get_settings)) -> GreetingResponse:
    return greet(cfg.environment)
