"""
Response models for the proxy HTTP surface
"""

from typing import Any, Optional, Dict
from pydantic import BaseModel, Field, ConfigDict


class ErrorEnvelope(BaseModel):
    """Uniform error body returned by every proxy route"""

    model_config = ConfigDict(populate_by_name=True)

    error: str
    message: str
    validation_errors: Optional[Dict[str, Any]] = Field(None, alias="validationErrors")

    def to_content(self) -> dict:
        """JSON body, without validationErrors when there are none"""
        return self.model_dump(by_alias=True, exclude_none=True)


class HealthResponse(BaseModel):
    """Liveness response"""
    status: str = "ok"
    timestamp: str
