"""Per-pixel RGB predicates used by the image classifier.

Every predicate takes the red, green and blue channels and returns a boolean
mask. Channels may be plain numbers or equally shaped float arrays; only
element-wise numpy operations are used so both work.
"""

from __future__ import annotations

from collections.abc import Callable

import numpy as np
import numpy.typing as npt

Channel = float | npt.NDArray[np.float64]
Mask = bool | np.bool_ | npt.NDArray[np.bool_]
Predicate = Callable[[Channel, Channel, Channel], Mask]


def _brightness(r: Channel, g: Channel, b: Channel) -> Channel:
    return (r + g + b) / 3


def _spread(r: Channel, g: Channel, b: Channel) -> Channel:
    return np.maximum(np.maximum(r, g), b) - np.minimum(np.minimum(r, g), b)


def is_human_flesh_tone(r: Channel, g: Channel, b: Channel) -> Mask:
    """Skin colour across four overlapping bands: generic, light, medium, dark."""
    generic = (
        (r > 95) & (g > 40) & (b > 20)
        & (r > g) & (r > b)
        & (np.abs(r - g) > 15) & (r - b > 15)
        & (r < 255) & (g < 220) & (b < 180)
    )  # fmt: skip
    light = (
        (r > 180) & (g > 140) & (b > 100)
        & (r > g) & (g > b)
        & (r - g < 50) & (g - b < 50)
    )  # fmt: skip
    medium = (
        (r > 120) & (r < 200)
        & (g > 80) & (g < 160)
        & (b > 50) & (b < 120)
        & (r > g) & (g >= b)
    )  # fmt: skip
    dark = (
        (r > 60) & (r < 140)
        & (g > 40) & (g < 100)
        & (b > 20) & (b < 80)
        & (r >= g) & (g >= b)
        & (r - b > 20)
    )  # fmt: skip
    return generic | light | medium | dark


def is_face_structure(r: Channel, g: Channel, b: Channel) -> Mask:
    """Brighter, evenly graded skin typical of a lit face."""
    return (
        (r > 150) & (g > 120) & (b > 90)
        & (r > g) & (g > b)
        & (r - g < 40) & (g - b < 40)
        & (r < 240) & (g < 200) & (b < 160)
    )  # fmt: skip


def is_hair_texture(r: Channel, g: Channel, b: Channel) -> Mask:
    """Dark, brown, blonde or gray hair."""
    brightness = _brightness(r, g, b)
    dark = (brightness < 80) & (_spread(r, g, b) < 30)
    brown = (
        (r > 60) & (r < 150)
        & (g > 40) & (g < 120)
        & (b > 20) & (b < 100)
        & (r > g) & (g > b)
    )  # fmt: skip
    blonde = (r > 180) & (g > 160) & (b > 100) & (r > g) & (g > b) & (r - b > 50)
    gray = (np.abs(r - g) < 20) & (np.abs(g - b) < 20) & (brightness > 120)
    return dark | brown | blonde | gray


def is_clothing_color(r: Channel, g: Channel, b: Channel) -> Mask:
    """Saturated mid-tones, or near-black and near-white fabrics."""
    brightness = _brightness(r, g, b)
    saturation = _spread(r, g, b)
    bright = (saturation > 50) & (brightness > 80) & (brightness < 200)
    dark = (brightness < 60) & (saturation < 40)
    light = (brightness > 200) & (saturation < 30)
    return bright | dark | light


def is_animal_feature(r: Channel, g: Channel, b: Channel) -> Mask:
    """Low-variance brown or gray fur, or vivid plumage."""
    avg = _brightness(r, g, b)
    variance = np.abs(r - avg) + np.abs(g - avg) + np.abs(b - avg)
    brown = (r > g) & (r > b) & (r < 180)
    gray = (np.abs(r - g) < 15) & (np.abs(g - b) < 15)
    fur = (variance < 25) & (avg > 40) & (avg < 160) & (brown | gray)
    bright = (np.maximum(np.maximum(r, g), b) > 200) & (_spread(r, g, b) > 100)
    return fur | bright


FEATURE_PREDICATES: dict[str, Predicate] = {
    "flesh_tone": is_human_flesh_tone,
    "face_structure": is_face_structure,
    "hair": is_hair_texture,
    "clothing": is_clothing_color,
    "animal": is_animal_feature,
}
