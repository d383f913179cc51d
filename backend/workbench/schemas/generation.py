from __future__ import annotations

from pydantic import BaseModel, Field

from workbench.schemas.circuit import CircuitSnapshot


class GenerationRequest(BaseModel):
    """Natural-language goal plus the circuit currently on the workbench."""

    goal: str = Field(..., min_length=3, description="What the sketch should do")
    circuit: CircuitSnapshot = Field(default_factory=CircuitSnapshot)


class GeneratedSolution(BaseModel):
    wiring: str
    code: str
