"""Declarative wiring rules per component type.

Each component type maps to a RuleSet: a tuple of small descriptors that
test net membership only ("does the net on this terminal contain a board
pin of role X?"). Adding a type means adding an entry to RULES.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from workbench.catalog import KEYPAD_LINES, SEGMENTS
from workbench.schemas.circuit import Component, ComponentType, Terminal
from workbench.validation.nets import NetMap
from workbench.validation.pins import PinRole, classify_pin


def net_has_role(net: frozenset[Terminal], role: PinRole) -> bool:
    return any(t.is_board_pin and classify_pin(t.terminal_id) is role for t in net)


@dataclass(frozen=True)
class RuleContext:
    nets: NetMap
    components: Sequence[Component]

    def net(self, component: Component, terminal_id: str) -> frozenset[Terminal]:
        return self.nets.get_net(component.id, terminal_id)


@dataclass(frozen=True)
class RoleRule:
    """Terminal must share a net with a board pin of `role`.

    With required=False an unwired terminal is accepted; only a wired one
    with the wrong role is reported.
    """

    terminal: str
    role: PinRole
    required: bool = True

    def evaluate(self, component: Component, ctx: RuleContext) -> list[str]:
        net = ctx.net(component, self.terminal)
        if not net:
            if self.required:
                return [f"{component.display_name}: terminal '{self.terminal}' is not connected."]
            return []
        if not net_has_role(net, self.role):
            return [
                f"{component.display_name}: terminal '{self.terminal}' must be "
                f"connected to a {self.role.label} pin."
            ]
        return []


@dataclass(frozen=True)
class EitherOrderRule:
    """Two terminals must cover two roles, in either assignment."""

    first: str
    second: str
    roles: tuple[PinRole, PinRole]

    def evaluate(self, component: Component, ctx: RuleContext) -> list[str]:
        net_a = ctx.net(component, self.first)
        net_b = ctx.net(component, self.second)
        name = component.display_name
        if not net_a and not net_b:
            return [f"{name}: terminals '{self.first}' and '{self.second}' are not connected."]
        if not net_a or not net_b:
            missing = self.second if net_a else self.first
            return [f"{name}: terminal '{missing}' is not connected."]

        x, y = self.roles
        if (net_has_role(net_a, x) and net_has_role(net_b, y)) or (
            net_has_role(net_a, y) and net_has_role(net_b, x)
        ):
            return []
        return [
            f"{name}: terminals '{self.first}' and '{self.second}' "
            f"must be connected one to a {x.label} pin and the other to a {y.label} pin."
        ]


@dataclass(frozen=True)
class SeriesRule:
    """Terminal must reach a board pin of `role` through a passive part.

    The first terminal of a `through` part found on the terminal's net
    (component order, then terminal order) is taken; the part's other
    terminal must sit on a net with the required role.
    """

    terminal: str
    through: ComponentType
    role: PinRole

    def evaluate(self, component: Component, ctx: RuleContext) -> list[str]:
        net = ctx.net(component, self.terminal)
        name = component.display_name
        if not net:
            return [f"{name}: terminal '{self.terminal}' is not connected."]

        found = self._find_part(net, ctx)
        if found is None:
            return [
                f"{name}: terminal '{self.terminal}' must be connected to a "
                f"{self.role.label} pin through a {self.through.value}."
            ]

        part, other = found
        if not net_has_role(ctx.net(part, other), self.role):
            return [
                f"{name}: the {self.through.value} '{part.display_name}' on terminal "
                f"'{self.terminal}' must lead to a {self.role.label} pin."
            ]
        return []

    def _find_part(self, net: frozenset[Terminal], ctx: RuleContext) -> tuple[Component, str] | None:
        for part in ctx.components:
            if part.type != self.through.value:
                continue
            pair = ("t1", "t2")
            for i, terminal_id in enumerate(pair):
                if Terminal(component_id=part.id, terminal_id=terminal_id) in net:
                    return part, pair[1 - i]
        return None


Rule = RoleRule | EitherOrderRule | SeriesRule


@dataclass(frozen=True)
class RuleSet:
    rules: tuple[Rule, ...] = ()
    note: str | None = None  # advisory only; never a violation


D, A, G = PinRole.DIGITAL, PinRole.ANALOG, PinRole.GROUND
V5 = PinRole.V5


RULES: dict[ComponentType, RuleSet] = {
    ComponentType.LED: RuleSet(
        rules=(
            RoleRule("cathode", G),
            SeriesRule("anode", through=ComponentType.RESISTOR, role=D),
        )
    ),
    ComponentType.BUTTON: RuleSet(rules=(EitherOrderRule("t1", "t2", (D, G)),)),
    ComponentType.POTENTIOMETER: RuleSet(
        rules=(
            RoleRule("wiper", A),
            EitherOrderRule("t1", "t2", (V5, G)),
        )
    ),
    ComponentType.SERVO: RuleSet(
        rules=(RoleRule("signal", D), RoleRule("vcc", V5), RoleRule("gnd", G))
    ),
    ComponentType.BUZZER: RuleSet(rules=(EitherOrderRule("t1", "t2", (D, G)),)),
    ComponentType.SEVEN_SEGMENT_DISPLAY: RuleSet(
        rules=(RoleRule("common", G, required=False),)
        + tuple(RoleRule(seg, D, required=False) for seg in SEGMENTS)
    ),
    ComponentType.ULTRASONIC_SENSOR: RuleSet(
        rules=(
            RoleRule("vcc", V5),
            RoleRule("gnd", G),
            RoleRule("trig", D),
            RoleRule("echo", D),
        )
    ),
    ComponentType.LCD: RuleSet(
        rules=(RoleRule("vss", G), RoleRule("vdd", V5))
        + tuple(RoleRule(t, D) for t in ("rs", "e", "d4", "d5", "d6", "d7"))
    ),
    ComponentType.JOYSTICK: RuleSet(
        rules=(
            RoleRule("gnd", G),
            RoleRule("vcc", V5),
            RoleRule("vrx", A),
            RoleRule("vry", A),
            RoleRule("sw", D, required=False),
        )
    ),
    ComponentType.PIR_SENSOR: RuleSet(
        rules=(RoleRule("gnd", G), RoleRule("vcc", V5), RoleRule("out", D))
    ),
    ComponentType.TEMP_SENSOR: RuleSet(
        rules=(RoleRule("gnd", G), RoleRule("vcc", V5), RoleRule("vout", A))
    ),
    ComponentType.RGB_LED: RuleSet(
        rules=(RoleRule("common", G),)
        + tuple(RoleRule(t, D, required=False) for t in ("r", "g", "b"))
    ),
    ComponentType.RELAY: RuleSet(
        rules=(RoleRule("gnd", G), RoleRule("vcc", V5), RoleRule("in", D))
    ),
    ComponentType.KEYPAD: RuleSet(
        rules=tuple(RoleRule(line, D, required=False) for line in KEYPAD_LINES)
    ),
    ComponentType.DC_MOTOR: RuleSet(
        rules=(EitherOrderRule("t1", "t2", (G, D)),),
        note=(
            "a real DC motor draws more current than a GPIO pin can supply; "
            "use a transistor or motor driver outside the simulator."
        ),
    ),
}


def rules_for(component: Component) -> RuleSet | None:
    component_type = component.component_type
    if component_type is None:
        return None
    return RULES.get(component_type)
