"""Board pin roles.

Every rule in the checker asks one question of a net: does it contain a
board pin of a given role? The role is derived from the pin id alone.
"""

from __future__ import annotations

import re
from enum import Enum

DIGITAL_PIN_RANGE = range(0, 14)

_ANALOG_RE = re.compile(r"^A\d+$")
_DIGITAL_RE = re.compile(r"^(?:pin-)?(\d+)$")


class PinRole(str, Enum):
    DIGITAL = "digital"
    ANALOG = "analog"
    GROUND = "ground"
    V5 = "5v"
    V3_3 = "3.3v"

    @property
    def label(self) -> str:
        return _ROLE_LABELS[self]


_ROLE_LABELS = {
    PinRole.DIGITAL: "digital",
    PinRole.ANALOG: "analog",
    PinRole.GROUND: "GND",
    PinRole.V5: "5V",
    PinRole.V3_3: "3.3V",
}


def classify_pin(pin_id: str) -> PinRole | None:
    """Map a board pin id to its electrical role, or None if it has none."""
    lowered = pin_id.lower()
    if lowered.startswith("gnd"):
        return PinRole.GROUND
    if lowered == "5v":
        return PinRole.V5
    if lowered == "3.3v":
        return PinRole.V3_3
    if _ANALOG_RE.match(pin_id):
        return PinRole.ANALOG

    m = _DIGITAL_RE.match(pin_id)
    if m and int(m.group(1)) in DIGITAL_PIN_RANGE:
        return PinRole.DIGITAL
    return None
