"""FastAPI router exposing expression evaluation and the unit table."""

from __future__ import annotations

from typing import Dict, List

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from ..calculator import calculate
from ..errors import ConvertError
from ..formatting import dimension_map, format_quantity
from ..observability import run_scope
from ..units.registry import DEFAULT_REGISTRY


router = APIRouter(prefix="/v1/convert", tags=["convert"])


class EvaluateReq(BaseModel):
    expression: str = Field(..., description="Expression such as '3 lbf + 2 N'")
    precision: int | None = Field(default=None, ge=1, description="Significant digits for 'formatted'")


class EvaluateResp(BaseModel):
    ok: bool
    magnitude: float
    dimensions: Dict[str, int]
    formatted: str
    run_id: str


@router.post("/evaluate", response_model=EvaluateResp)
def evaluate_expression(req: EvaluateReq) -> EvaluateResp:
    with run_scope() as run_id:
        try:
            result = calculate(req.expression)
        except ConvertError as exc:
            raise HTTPException(
                status_code=422,
                detail={"stage": exc.stage, "message": exc.message, "run_id": run_id},
            )

    return EvaluateResp(
        ok=True,
        magnitude=result.magnitude,
        dimensions=dimension_map(result),
        formatted=format_quantity(result, precision=req.precision),
        run_id=run_id,
    )


class UnitModel(BaseModel):
    symbol: str
    description: str
    magnitude: float
    dimensions: Dict[str, int]


class UnitsResp(BaseModel):
    units: List[UnitModel]


@router.get("/units", response_model=UnitsResp)
def list_units() -> UnitsResp:
    units = [
        UnitModel(
            symbol=symbol,
            description=DEFAULT_REGISTRY.describe(symbol),
            magnitude=quantity.magnitude,
            dimensions=dimension_map(quantity),
        )
        for symbol, quantity in DEFAULT_REGISTRY.items()
    ]
    return UnitsResp(units=units)


__all__ = ["router"]
