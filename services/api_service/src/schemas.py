from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field

class HelloResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str
    method: Optional[str] = None
    received_data: Any = Field(default=None, alias="receivedData")
    timestamp: str

class GreetingResponse(BaseModel):
    greeting: str
    timestamp: str
    environment: str
