"""Static workbench catalogue: board header pins, component terminals,
and prototyping board geometry.

Pure data. The circuit editor must use exactly these terminal ids when it
emits wires; anything else resolves to "not connected".
"""

from __future__ import annotations

from workbench.schemas.circuit import ComponentType
from workbench.validation.pins import PinRole, classify_pin


# ─── Arduino Uno Header ───

BOARD_PINS: tuple[tuple[str, str], ...] = (
    # (pin id, silkscreen label); top digital header first
    ("aref", "AREF"),
    ("gnd-1", "GND"),
    ("pin-13", "13"),
    ("pin-12", "12"),
    ("pin-11", "~11"),
    ("pin-10", "~10"),
    ("pin-9", "~9"),
    ("pin-8", "8"),
    ("pin-7", "7"),
    ("pin-6", "~6"),
    ("pin-5", "~5"),
    ("pin-4", "4"),
    ("pin-3", "~3"),
    ("pin-2", "2"),
    ("pin-1", "1 TX"),
    ("pin-0", "0 RX"),
    # power header
    ("io-ref", "IOREF"),
    ("reset", "RESET"),
    ("3.3v", "3.3V"),
    ("5v", "5V"),
    ("gnd-2", "GND"),
    ("gnd-3", "GND"),
    ("vin", "VIN"),
    # analog header
    ("A0", "A0"),
    ("A1", "A1"),
    ("A2", "A2"),
    ("A3", "A3"),
    ("A4", "A4/SDA"),
    ("A5", "A5/SCL"),
)


def board_pin_roles() -> dict[str, PinRole | None]:
    return {pin_id: classify_pin(pin_id) for pin_id, _ in BOARD_PINS}


# ─── Prototyping Board Geometry ───

PROTOBOARD_COLUMNS = 30
PROTOBOARD_RAILS = ("top-plus", "top-minus", "bottom-plus", "bottom-minus")
# Rows inside one group share a column strip; the centre channel splits them.
PROTOBOARD_STRIP_GROUPS = (("a", "b", "c", "d", "e"), ("f", "g", "h", "i", "j"))


def rail_terminal(rail: str, column: int) -> str:
    return f"{rail}-{column}"


def strip_terminal(row: str, column: int) -> str:
    return f"{row}{column}"


def protoboard_terminals() -> list[str]:
    terminals = [
        rail_terminal(rail, col)
        for rail in PROTOBOARD_RAILS
        for col in range(1, PROTOBOARD_COLUMNS + 1)
    ]
    for group in PROTOBOARD_STRIP_GROUPS:
        for col in range(1, PROTOBOARD_COLUMNS + 1):
            terminals.extend(strip_terminal(row, col) for row in group)
    return terminals


# ─── Component Terminals ───

SEGMENTS = ("a", "b", "c", "d", "e", "f", "g", "dp")
KEYPAD_LINES = ("r1", "r2", "r3", "r4", "c1", "c2", "c3", "c4")

COMPONENT_TERMINALS: dict[ComponentType, tuple[str, ...]] = {
    ComponentType.LED: ("anode", "cathode"),
    ComponentType.RESISTOR: ("t1", "t2"),
    ComponentType.BUTTON: ("t1", "t2"),
    ComponentType.POTENTIOMETER: ("t1", "wiper", "t2"),
    ComponentType.SERVO: ("signal", "vcc", "gnd"),
    ComponentType.BUZZER: ("t1", "t2"),
    ComponentType.SEVEN_SEGMENT_DISPLAY: SEGMENTS + ("common",),
    ComponentType.ULTRASONIC_SENSOR: ("vcc", "trig", "echo", "gnd"),
    ComponentType.LCD: ("vss", "vdd", "rs", "e", "d4", "d5", "d6", "d7"),
    ComponentType.JOYSTICK: ("gnd", "vcc", "vrx", "vry", "sw"),
    ComponentType.PIR_SENSOR: ("vcc", "out", "gnd"),
    ComponentType.TEMP_SENSOR: ("vcc", "vout", "gnd"),
    ComponentType.RGB_LED: ("r", "common", "g", "b"),
    ComponentType.RELAY: ("vcc", "gnd", "in"),
    ComponentType.KEYPAD: KEYPAD_LINES,
    ComponentType.DC_MOTOR: ("t1", "t2"),
}


def terminals_for(component_type: ComponentType) -> tuple[str, ...]:
    if component_type is ComponentType.PROTOBOARD:
        return tuple(protoboard_terminals())
    return COMPONENT_TERMINALS.get(component_type, ())
