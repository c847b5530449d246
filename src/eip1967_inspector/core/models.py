"""Result model for a completed inspection."""

from typing import Any, Dict, List

from pydantic import BaseModel, Field


class InspectionResult(BaseModel):
    proxy_address: str
    implementation_address: str
    abi: List[Dict[str, Any]] = Field(default_factory=list)
    abi_source: str
