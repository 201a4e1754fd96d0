"""Placeholder explanation data for the dashboard charts.

Neither function explains anything: SHAP values and Grad-CAM heatmaps are
drawn from a random generator so the rendering layer has something to plot.
Pass a seeded ``random.Random`` for reproducible output.
"""

from __future__ import annotations

import csv
import io
import math
import random
from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ShapValue:
    """Attribution of one input feature, in [-1, 1)."""

    feature: str
    value: float


def generate_shap_values(
    features: Sequence[str], rng: random.Random | None = None
) -> list[ShapValue]:
    """Draw one uniform value in [-1, 1) per feature."""
    rng = rng if rng is not None else random.Random()
    return [ShapValue(feature=f, value=(rng.random() - 0.5) * 2) for f in features]


def generate_gradcam_heatmap(
    width: int, height: int, rng: random.Random | None = None
) -> list[list[float]]:
    """Build a height x width grid with a noisy hotspot in the centre.

    Intensity falls off linearly with distance from the centre, gets up to
    ±0.1 of noise, and is clamped to [0, 1].
    """
    if width <= 0 or height <= 0:
        return []

    rng = rng if rng is not None else random.Random()
    center_x = width / 2
    center_y = height / 2
    max_distance = math.hypot(center_x, center_y)

    rows: list[list[float]] = []
    for i in range(height):
        row: list[float] = []
        for j in range(width):
            distance = math.hypot(j - center_x, i - center_y)
            intensity = max(0.0, 1 - distance / max_distance) + rng.random() * 0.2 - 0.1
            row.append(max(0.0, min(1.0, intensity)))
        rows.append(row)
    return rows


def parse_csv_features(text: str) -> list[str]:
    """Return the header row of CSV text, blank column names dropped."""
    reader = csv.reader(io.StringIO(text))
    header = next(reader, [])
    return [name.strip() for name in header if name.strip()]
