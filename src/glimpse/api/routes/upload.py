"""Single upload endpoint that picks the analyzer from the file kind."""

from __future__ import annotations

import asyncio
from dataclasses import asdict

from fastapi import APIRouter, HTTPException, UploadFile

from glimpse.api.routes.image import classify_upload
from glimpse.api.routes.text import analyze_text_report, ensure_text_size
from glimpse.core.dependencies import LexiconDep, RngDep, SettingsDep
from glimpse.core.exceptions import DecodeError, EmptyDocumentError
from glimpse.core.logging import get_logger
from glimpse.processing.dispatch import FileKind, decode_text, detect_file_kind
from glimpse.processing.explain import generate_shap_values, parse_csv_features
from glimpse.processing.pdf import extract_pdf_text

logger = get_logger(__name__)

router = APIRouter()


@router.post("")
async def upload(
    file: UploadFile,
    settings: SettingsDep,
    lexicon: LexiconDep,
    rng: RngDep,
) -> dict[str, object]:
    kind = detect_file_kind(file.filename, file.content_type)
    data = await file.read()
    if len(data) > settings.max_upload_bytes:
        logger.warning("Upload rejected", filename=file.filename, size=len(data))
        raise HTTPException(
            status_code=413,
            detail=f"Upload of {len(data)} bytes exceeds limit of {settings.max_upload_bytes}",
        )

    logger.info("Upload received", filename=file.filename, kind=kind.value, size=len(data))

    if kind == FileKind.IMAGE:
        return {"kind": kind, **await classify_upload(data, file.filename, settings, rng)}

    if kind == FileKind.TEXT:
        text = decode_text(data)
        ensure_text_size(text, settings)
        return {"kind": kind, **await analyze_text_report(text, settings, lexicon)}

    if kind == FileKind.PDF:
        try:
            document = await asyncio.to_thread(extract_pdf_text, data, settings.pdf_max_pages)
        except (DecodeError, EmptyDocumentError) as e:
            logger.warning("PDF rejected", filename=file.filename, error=e.message)
            raise HTTPException(status_code=422, detail=e.message) from e
        ensure_text_size(document.text, settings)
        return {
            "kind": kind,
            "page_count": document.page_count,
            "pages_read": document.pages_read,
            **await analyze_text_report(document.text, settings, lexicon),
        }

    if kind == FileKind.TABULAR:
        features = parse_csv_features(decode_text(data))
        return {
            "kind": kind,
            "features": features,
            "shap_values": [asdict(v) for v in generate_shap_values(features, rng)],
        }

    raise HTTPException(status_code=415, detail=f"No analyzer for {kind.value} files")
