"""Unit tests for circuit snapshot schemas."""

import pytest
from pydantic import ValidationError

from workbench.schemas.circuit import Component, NoState


def _component(type_: str, state: dict | None = None) -> Component:
    payload = {"id": "c-1", "type": type_}
    if state is not None:
        payload["state"] = state
    return Component.model_validate(payload)


class TestComponentState:
    def test_default_state_is_none(self):
        assert isinstance(_component("led").state, NoState)

    def test_matching_kind_accepted(self):
        assert _component("led", {"kind": "led", "is_on": True}).state.is_on
        assert _component("potentiometer", {"kind": "level", "value": 1023}).state.value == 1023
        assert _component("dc_motor", {"kind": "switch", "is_on": True}).state.is_on

    def test_none_kind_fits_any_type(self):
        assert _component("servo", {"kind": "none"}).state.kind == "none"

    def test_mismatched_kind_rejected(self):
        with pytest.raises(ValidationError, match="segments"):
            _component("potentiometer", {"kind": "segments", "segments": {"a": True}})

    def test_stateless_type_rejects_state(self):
        with pytest.raises(ValidationError):
            _component("resistor", {"kind": "switch", "is_on": True})

    def test_servo_angle_limited(self):
        assert _component("servo", {"kind": "level", "value": 180}).state.value == 180
        with pytest.raises(ValidationError, match="servo angle"):
            _component("servo", {"kind": "level", "value": 181})

    def test_unknown_type_takes_any_state(self):
        component = _component("flux_capacitor", {"kind": "rgb", "red": True})
        assert component.component_type is None
