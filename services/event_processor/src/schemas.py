from typing import Any, Dict, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field, JsonValue

class PubSubMessage(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid", frozen=True)

    data: str = Field(..., description="Base64-encoded JSON event")
    message_id: str = Field(..., alias="messageId", min_length=1)
    publish_time: str = Field(..., alias="publishTime", min_length=1)
    attributes: Optional[Dict[str, str]] = None

class PubSubEnvelope(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    message: PubSubMessage
    subscription: str

class DecodedEvent(BaseModel):
    # The event schema is open: only the "event" tag is inspected
    model_config = ConfigDict(extra="ignore", frozen=True)

    event: JsonValue = None
    data: JsonValue = None
    timestamp: JsonValue = None

class HandlerResult(BaseModel):
    # Handler-specific fields (userId, orderId, ...) ride along as extras
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    status: Literal["processed", "acknowledged"]
    event_type: JsonValue = Field(default=None, alias="eventType")

class EventResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool
    message_id: str = Field(..., alias="messageId")
    result: Dict[str, Any] = Field(default_factory=dict)
    processing_time: str = Field(..., alias="processingTime")
