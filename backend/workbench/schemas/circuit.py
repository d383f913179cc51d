from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

BOARD_ID = "arduino"

TerminalKey = tuple[str, str]  # (component_id, terminal_id)


class ComponentType(str, Enum):
    LED = "led"
    BUTTON = "button"
    POTENTIOMETER = "potentiometer"
    SERVO = "servo"
    RESISTOR = "resistor"
    BUZZER = "buzzer"
    SEVEN_SEGMENT_DISPLAY = "seven_segment_display"
    ULTRASONIC_SENSOR = "ultrasonic_sensor"
    LCD = "lcd"
    JOYSTICK = "joystick"
    PIR_SENSOR = "pir_sensor"
    TEMP_SENSOR = "temp_sensor"
    RGB_LED = "rgb_led"
    RELAY = "relay"
    KEYPAD = "keypad"
    DC_MOTOR = "dc_motor"
    PROTOBOARD = "protoboard"


class Terminal(BaseModel):
    """One electrical contact: a board pin or a component terminal."""

    model_config = ConfigDict(frozen=True)

    component_id: str
    terminal_id: str

    @property
    def key(self) -> TerminalKey:
        return (self.component_id, self.terminal_id)

    @property
    def is_board_pin(self) -> bool:
        return self.component_id == BOARD_ID


class Wire(BaseModel):
    id: str
    start: Terminal
    end: Terminal


# ─── Per-type simulation state (tagged union on `kind`) ───


class LedState(BaseModel):
    kind: Literal["led"] = "led"
    is_on: bool = False


class ButtonState(BaseModel):
    kind: Literal["button"] = "button"
    is_pressed: bool = False


class LevelState(BaseModel):
    """Potentiometer reading (0-1023) or servo angle (0-180)."""

    kind: Literal["level"] = "level"
    value: int = Field(default=0, ge=0, le=1023)


class SegmentState(BaseModel):
    kind: Literal["segments"] = "segments"
    segments: dict[str, bool] = Field(default_factory=dict)


class RgbState(BaseModel):
    kind: Literal["rgb"] = "rgb"
    red: bool = False
    green: bool = False
    blue: bool = False


class SwitchState(BaseModel):
    kind: Literal["switch"] = "switch"
    is_on: bool = False


class NoState(BaseModel):
    kind: Literal["none"] = "none"


ComponentState = Annotated[
    Union[LedState, ButtonState, LevelState, SegmentState, RgbState, SwitchState, NoState],
    Field(discriminator="kind"),
]

SERVO_MAX_ANGLE = 180

# Component type → the only state kind it may carry besides "none".
# Known types missing here are stateless.
STATE_KINDS: dict[str, str] = {
    ComponentType.LED.value: "led",
    ComponentType.BUTTON.value: "button",
    ComponentType.POTENTIOMETER.value: "level",
    ComponentType.SERVO.value: "level",
    ComponentType.SEVEN_SEGMENT_DISPLAY.value: "segments",
    ComponentType.RGB_LED.value: "rgb",
    ComponentType.RELAY.value: "switch",
    ComponentType.BUZZER.value: "switch",
    ComponentType.DC_MOTOR.value: "switch",
}


class Component(BaseModel):
    id: str
    type: str  # ComponentType value; unknown types are accepted and go unchecked
    label: str = ""
    x: float | None = None
    y: float | None = None
    state: ComponentState = Field(default_factory=NoState)

    @model_validator(mode="after")
    def validate_state_kind(self) -> Component:
        kind = self.state.kind
        if self.component_type is None or kind == "none":
            return self
        expected = STATE_KINDS.get(self.type, "none")
        if kind != expected:
            raise ValueError(
                f"state kind '{kind}' does not fit a {self.type}; expected '{expected}'"
            )
        if self.type == ComponentType.SERVO.value and self.state.value > SERVO_MAX_ANGLE:
            raise ValueError(f"servo angle must be between 0 and {SERVO_MAX_ANGLE}")
        return self

    @property
    def display_name(self) -> str:
        return self.label or self.id

    @property
    def component_type(self) -> ComponentType | None:
        try:
            return ComponentType(self.type)
        except ValueError:
            return None


class CircuitSnapshot(BaseModel):
    components: list[Component] = Field(default_factory=list)
    wires: list[Wire] = Field(default_factory=list)
