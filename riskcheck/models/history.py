"""
History entry schema.

One persisted prediction. The shape is what a history sink stores; the
core only supplies the field values.
"""
from datetime import datetime
from typing import Any, Dict

from pydantic import BaseModel, Field


class HistoryEntry(BaseModel):
    id: int = Field(..., description="Opaque, strictly increasing identifier")
    condition_name: str
    score: int = Field(..., ge=0, le=100)
    tier: str
    measurements: Dict[str, Any] = Field(default_factory=dict)
    timestamp: datetime
