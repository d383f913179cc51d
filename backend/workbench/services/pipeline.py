"""Workbench Pipeline

Validate → (only if valid) Generate wiring + sketch
"""

from __future__ import annotations

import logging

from workbench.ai.generator import SketchGenerator
from workbench.schemas.generation import GeneratedSolution, GenerationRequest
from workbench.schemas.validation import ValidationStatus
from workbench.validation.engine import validate_circuit

logger = logging.getLogger(__name__)


class CircuitInvalidError(Exception):
    """Raised when generation is requested for a circuit with violations."""

    def __init__(self, violations: list[str]):
        self.violations = violations
        super().__init__("Circuit has wiring errors:\n" + "\n".join(violations))


async def generate_solution(
    request: GenerationRequest,
    generator: SketchGenerator,
) -> GeneratedSolution:
    """Run the generator for a request whose circuit passes validation."""
    circuit = request.circuit
    validation = validate_circuit(circuit)

    if validation.status != ValidationStatus.VALID:
        logger.info(
            "Generation blocked — %d wiring violation(s)", len(validation.violations)
        )
        raise CircuitInvalidError(validation.violations)

    logger.info("Generation START: %s...", request.goal[:80])
    solution = await generator.generate(request.goal, circuit.components, circuit.wires)
    logger.info("Generation complete — code=%d chars", len(solution.code))
    return solution
