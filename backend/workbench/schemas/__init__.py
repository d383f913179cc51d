from workbench.schemas.circuit import (
    BOARD_ID,
    CircuitSnapshot,
    Component,
    ComponentType,
    Terminal,
    Wire,
)
from workbench.schemas.validation import ValidationResult, ValidationStatus
from workbench.schemas.generation import GenerationRequest, GeneratedSolution

__all__ = [
    "BOARD_ID",
    "CircuitSnapshot",
    "Component",
    "ComponentType",
    "Terminal",
    "Wire",
    "ValidationResult",
    "ValidationStatus",
    "GenerationRequest",
    "GeneratedSolution",
]
