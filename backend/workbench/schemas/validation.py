from __future__ import annotations

from enum import Enum
from pydantic import BaseModel, Field


class ValidationStatus(str, Enum):
    VALID = "VALID"
    INVALID = "INVALID"


class ValidationResult(BaseModel):
    status: ValidationStatus
    violations: list[str] = Field(default_factory=list)
    notes: list[str] = Field(default_factory=list)
    nets_total: int = 0
    components_checked: int = 0
