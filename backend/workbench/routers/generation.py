"""Generation router — wiring instructions + sketch from a goal."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Request

from workbench.ai.generator import GenerationError, SketchGenerator
from workbench.schemas.generation import GeneratedSolution, GenerationRequest
from workbench.services.pipeline import CircuitInvalidError, generate_solution

router = APIRouter()


def get_generator(request: Request) -> SketchGenerator:
    """Generator bound to the client created in the app lifespan."""
    return request.app.state.generator


@router.post("", response_model=GeneratedSolution)
async def generate(
    data: GenerationRequest,
    generator: SketchGenerator = Depends(get_generator),
):
    """Validate the circuit, then ask the model for wiring and code."""
    try:
        return await generate_solution(data, generator)
    except CircuitInvalidError as e:
        raise HTTPException(status_code=422, detail={"violations": e.violations})
    except GenerationError as e:
        raise HTTPException(status_code=502, detail=str(e))
