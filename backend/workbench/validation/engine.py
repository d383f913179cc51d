"""Wiring Validation Engine — Deterministic Rule-Based Circuit Checker.

Pure Python. No AI. Fully unit-testable.

Runs three stages over an immutable circuit snapshot:
  1. Net building    — wires + prototyping board bus ties → graph
  2. Net resolution  — BFS flood fill → electrical nets
  3. Rule checking   — per-type rule descriptors against those nets

Input:  components + wires (or a CircuitSnapshot)
Output: violation strings, or a ValidationResult for the API
"""

from __future__ import annotations

import logging
from typing import Sequence

from workbench.schemas.circuit import CircuitSnapshot, Component, Wire
from workbench.schemas.validation import ValidationResult, ValidationStatus
from workbench.validation.nets import NetMap
from workbench.validation.rules import RuleContext, rules_for

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════
# Rule Checker
# ═══════════════════════════════════════════════════════════


def _check(
    components: Sequence[Component],
    wires: Sequence[Wire],
) -> tuple[list[str], list[str], int]:
    nets = NetMap.from_circuit(components, wires)
    ctx = RuleContext(nets=nets, components=tuple(components))
    violations: list[str] = []
    notes: list[str] = []

    for component in components:
        rule_set = rules_for(component)
        if rule_set is None:
            logger.debug(
                "No wiring rules for %s (type=%s); accepted as-is",
                component.id,
                component.type,
            )
            continue

        for rule in rule_set.rules:
            violations.extend(rule.evaluate(component, ctx))
        if rule_set.note:
            notes.append(f"{component.display_name}: {rule_set.note}")

    return violations, notes, len(nets)


def check_circuit(
    components: Sequence[Component],
    wires: Sequence[Wire],
) -> list[str]:
    """Return one human-readable string per unmet wiring requirement.

    An empty list means the circuit may be simulated. Components of
    unknown type are not checked.
    """
    violations, _, _ = _check(components, wires)
    return violations


# ═══════════════════════════════════════════════════════════
# Main Validator
# ═══════════════════════════════════════════════════════════


def validate_circuit(snapshot: CircuitSnapshot) -> ValidationResult:
    """Validate a snapshot and wrap the outcome for API consumers.

    Advisory notes never affect the status.
    """
    violations, notes, nets_total = _check(snapshot.components, snapshot.wires)

    status = ValidationStatus.VALID if not violations else ValidationStatus.INVALID
    logger.debug(
        "Validated %d components over %d nets — status=%s, violations=%d",
        len(snapshot.components),
        nets_total,
        status.value,
        len(violations),
    )

    return ValidationResult(
        status=status,
        violations=violations,
        notes=notes,
        nets_total=nets_total,
        components_checked=len(snapshot.components),
    )
