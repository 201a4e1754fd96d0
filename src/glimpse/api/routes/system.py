"""System config endpoint."""

from fastapi import APIRouter

from glimpse.core.dependencies import SettingsDep

router = APIRouter()


@router.get("/config")
async def system_config(settings: SettingsDep) -> dict[str, object]:
    return {
        "env": settings.env,
        "max_upload_bytes": settings.max_upload_bytes,
        "max_text_chars": settings.max_text_chars,
        "image_max_dimension": settings.image_max_dimension,
        "image_decode_timeout": settings.image_decode_timeout,
        "word_frequency_limit": settings.word_frequency_limit,
        "key_phrase_limit": settings.key_phrase_limit,
        "pdf_max_pages": settings.pdf_max_pages,
        "seeded": settings.random_seed is not None,
        "custom_lexicon": settings.lexicon_path is not None,
    }
