from typing import Any, Dict, List

from pydantic import BaseModel, Field


class PaginatedResponse(BaseModel):
    data: List[Dict[str, Any]] = Field(default_factory=list)
    total: int = Field(0, description="Total number of matching rows")
    skip: int = Field(0, ge=0, description="Number of rows skipped")
    limit: int = Field(50, ge=1, description="Maximum rows returned")
