from pydantic import BaseModel, ConfigDict
from typing import Optional, List, Any, Dict

class EventPayload(BaseModel):
    """Event fields as sent by a client. Any field is accepted."""
    model_config = ConfigDict(extra="allow")

class EventFile(BaseModel):
    field: str
    filename: Optional[str] = None
    content_type: Optional[str] = None
    content: bytes

class MultipartEventPayload(BaseModel):
    data: Dict[str, Any]
    files: List[EventFile] = []

class EventQuery(BaseModel):
    filters: Dict[str, str] = {}
    sort: Optional[str] = None
    limit: Optional[int] = None
    start: Optional[int] = None
