"""Placeholder explanation endpoints (random SHAP values and heatmaps)."""

from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter, Query
from pydantic import BaseModel, Field

from glimpse.core.dependencies import RngDep
from glimpse.processing.explain import generate_gradcam_heatmap, generate_shap_values

router = APIRouter()


class ShapRequest(BaseModel):
    features: list[str] = Field(description="Feature names to attribute")


@router.post("/shap")
async def shap(body: ShapRequest, rng: RngDep) -> list[dict[str, object]]:
    return [asdict(v) for v in generate_shap_values(body.features, rng)]


@router.get("/gradcam")
async def gradcam(
    rng: RngDep,
    width: int = Query(default=32, ge=1, le=256),
    height: int = Query(default=32, ge=1, le=256),
) -> dict[str, object]:
    return {
        "width": width,
        "height": height,
        "data": generate_gradcam_heatmap(width, height, rng),
    }
