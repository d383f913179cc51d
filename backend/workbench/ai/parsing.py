"""Extraction of wiring prose and sketch source from model output."""

from __future__ import annotations

import re

from workbench.ai.prompts import CODE_HEADING, WIRING_HEADING
from workbench.schemas.generation import GeneratedSolution

MISSING_WIRING = "Could not generate wiring instructions."
MISSING_CODE = (
    "// Could not generate code. Please check your prompt and circuit.\n"
    "void setup() {}\n"
    "void loop() {}"
)

_WIRING_RE = re.compile(
    re.escape(WIRING_HEADING) + r"\s*(.*?)(?=" + re.escape(CODE_HEADING) + r"|$)",
    re.DOTALL,
)
_CODE_RE = re.compile(
    re.escape(CODE_HEADING) + r"\s*```(?:cpp|c\+\+)?\s*(.*?)\s*```",
    re.DOTALL,
)
_ANY_CODE_RE = re.compile(r"```(?:cpp|c\+\+)?\s*(.*?)\s*```", re.DOTALL)


def extract_wiring(text: str) -> str | None:
    m = _WIRING_RE.search(text)
    if m and m.group(1).strip():
        return m.group(1).strip()
    return None


def extract_code(text: str) -> str | None:
    """Sketch under the code heading, else the first fenced block anywhere."""
    for pattern in (_CODE_RE, _ANY_CODE_RE):
        m = pattern.search(text)
        if m and m.group(1).strip():
            return m.group(1).strip()
    return None


def parse_solution(text: str) -> GeneratedSolution:
    """Split a model answer into wiring and code, with placeholders for
    whichever part is missing."""
    return GeneratedSolution(
        wiring=extract_wiring(text) or MISSING_WIRING,
        code=extract_code(text) or MISSING_CODE,
    )
