"""Prompt templates for sketch generation.

Each prompt function returns (system_prompt, user_prompt) to keep
prompt engineering cleanly separated from the client code.
"""

from __future__ import annotations

from typing import Sequence

from workbench.schemas.circuit import BOARD_ID, Component, Terminal, Wire


# ─── Circuit Rendering ───


def _describe_terminal(terminal: Terminal, labels: dict[str, str]) -> str:
    if terminal.component_id == BOARD_ID:
        return f"Arduino pin {terminal.terminal_id.removeprefix('pin-')}"
    label = labels.get(terminal.component_id, "a component")
    return f"{label} terminal {terminal.terminal_id}"


def describe_circuit(components: Sequence[Component], wires: Sequence[Wire]) -> str:
    """Render the wire list as plain sentences for the model."""
    if not wires:
        return "No components are wired."

    labels = {c.id: c.display_name for c in components}
    return " ".join(
        f"{_describe_terminal(w.start, labels)} is connected to "
        f"{_describe_terminal(w.end, labels)}."
        for w in wires
    )


def describe_components(components: Sequence[Component]) -> str:
    return ", ".join(f"{c.display_name} ({c.type})" for c in components) or "none"


# ─── Shared Rules ───

WIRING_HEADING = "### Wiring Instructions"
CODE_HEADING = "### Arduino Code"

FORMAT_RULES = f"""
FORMATTING REQUIREMENTS:
- Use the exact markdown headings `{WIRING_HEADING}` and `{CODE_HEADING}`.
- Wrap the entire C++ sketch in a single markdown block: ```cpp ... ```
- Use clear, simple language and a numbered list for the wiring steps.
""".strip()


# ─── Sketch Generation ───


def sketch_generation_prompts(
    goal: str,
    components: Sequence[Component],
    wires: Sequence[Wire],
) -> tuple[str, str]:
    """Return (system, user) prompts for wiring + sketch generation."""

    system = f"""You are an expert Arduino programmer and electronics tutor.

Your task: provide a complete solution for an Arduino Uno project based on the user's request.

Provide a two-part response:
1. Wiring Instructions: a step-by-step guide to wire the available components for the goal.
   Acknowledge existing wiring and only describe missing or incorrect connections.
   Be specific about pin numbers (e.g. "Connect the LED's anode through the resistor to digital pin 13.").
2. Arduino Code: a complete, compilable sketch for the .ino file implementing the user's logic.

{FORMAT_RULES}"""

    user = f"""Components on the workbench: {describe_components(components)}.

Current wiring: "{describe_circuit(components, wires)}"

Request: "{goal}"
"""

    return system, user


# ─── Retry ───


def retry_prompt(previous_output: str) -> tuple[str, str]:
    """Ask the model to re-emit a response that is missing the code block."""

    system = f"""You previously answered an Arduino request but the answer could not be parsed.

{FORMAT_RULES}"""

    user = f"""Your previous answer was:

{previous_output}

Rewrite it so that it contains both required headings and exactly one ```cpp code block."""

    return system, user
