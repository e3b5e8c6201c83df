"""Pydantic schemas for task request/response validation."""

from pydantic import BaseModel, ConfigDict
from datetime import datetime
from typing import Optional


class TaskPayload(BaseModel):
    """Body of POST /tasks and PUT /tasks/{id}.

    All fields are optional at parse time; task_service rejects missing ones
    with a 400.
    """

    name: Optional[str] = None
    description: Optional[str] = None
    priority: Optional[str] = None


class TaskResponse(BaseModel):
    """Schema for task responses from API."""

    id: int
    user_id: int
    name: str
    description: str
    priority: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
