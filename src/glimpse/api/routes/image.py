"""Image classification endpoint."""

from __future__ import annotations

import asyncio
import random
from dataclasses import asdict

from fastapi import APIRouter, HTTPException, UploadFile

from glimpse.config import Settings
from glimpse.core.dependencies import RngDep, SettingsDep
from glimpse.core.exceptions import DecodeError, InputTooLargeError
from glimpse.core.logging import get_logger
from glimpse.processing.image import ImageClassifier, fallback_analysis

logger = get_logger(__name__)

router = APIRouter()


async def classify_upload(
    data: bytes,
    filename: str | None,
    settings: Settings,
    rng: random.Random,
) -> dict[str, object]:
    """Classify image bytes off the event loop, within the decode timeout.

    Undecodable images get the generic fallback result instead of an error.
    """
    classifier = ImageClassifier(
        rng=rng,
        max_dimension=settings.image_max_dimension,
        max_bytes=settings.max_upload_bytes,
    )
    try:
        result = await asyncio.wait_for(
            asyncio.to_thread(classifier.analyze, data, filename),
            timeout=settings.image_decode_timeout,
        )
    except InputTooLargeError as e:
        logger.warning("Image rejected", filename=filename, size=e.size, limit=e.limit)
        raise HTTPException(status_code=413, detail=e.message)
    except DecodeError as e:
        logger.warning("Image decode failed, using fallback", filename=filename, error=e.message)
        return {**asdict(fallback_analysis()), "fallback": True}
    except TimeoutError:
        logger.error(
            "Image analysis timed out", filename=filename, timeout=settings.image_decode_timeout
        )
        raise HTTPException(status_code=504, detail="Image analysis timed out")

    return {**asdict(result), "fallback": False}


@router.post("/analyze")
async def analyze(file: UploadFile, settings: SettingsDep, rng: RngDep) -> dict[str, object]:
    data = await file.read()
    return await classify_upload(data, file.filename, settings, rng)
