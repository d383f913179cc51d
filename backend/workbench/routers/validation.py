"""Validation router — stateless circuit validation endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from workbench.schemas.circuit import CircuitSnapshot
from workbench.schemas.validation import ValidationResult
from workbench.validation.engine import validate_circuit as run_validation

router = APIRouter()


@router.post("", response_model=ValidationResult)
async def validate_inline(snapshot: CircuitSnapshot):
    """Validate a circuit snapshot without persisting. Stateless."""
    return run_validation(snapshot)
