"""Catalogue router — component terminals and board pin roles."""

from fastapi import APIRouter

from workbench.catalog import BOARD_PINS, board_pin_roles, terminals_for
from workbench.schemas.circuit import ComponentType

router = APIRouter()


@router.get("/components")
async def list_component_types():
    """Terminal ids accepted for each component type."""
    return [
        {"type": t.value, "terminals": list(terminals_for(t))}
        for t in ComponentType
    ]


@router.get("/board")
async def list_board_pins():
    """Arduino header pins with their electrical role (null if none)."""
    roles = board_pin_roles()
    return [
        {
            "id": pin_id,
            "label": label,
            "role": roles[pin_id].value if roles[pin_id] else None,
        }
        for pin_id, label in BOARD_PINS
    ]
