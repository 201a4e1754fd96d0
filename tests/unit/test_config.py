"""Unit tests for Settings validators and env-var loading in config.py."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from glimpse.config import Settings, get_settings
from glimpse.core.constants import DEFAULT_MAX_UPLOAD_BYTES, IMAGE_MAX_DIMENSION

# ─────────────────────────────────────────────────────────────
# Validator tests
# ─────────────────────────────────────────────────────────────


class TestEmptyStringIsNone:
    """Tests for empty_string_is_none validator."""

    def test_empty_string(self) -> None:
        assert Settings.empty_string_is_none("") is None

    def test_whitespace(self) -> None:
        assert Settings.empty_string_is_none("   ") is None

    def test_value_passthrough(self) -> None:
        assert Settings.empty_string_is_none("42") == "42"
        assert Settings.empty_string_is_none(7) == 7

    def test_empty_seed_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RANDOM_SEED", "")
        monkeypatch.setenv("LEXICON_PATH", "")
        settings = Settings(_env_file=None)  # type: ignore[call-arg]
        assert settings.random_seed is None
        assert settings.lexicon_path is None


class TestLimits:
    """Ceilings must be positive."""

    @pytest.mark.parametrize(
        "env_var",
        [
            "MAX_UPLOAD_BYTES",
            "MAX_TEXT_CHARS",
            "IMAGE_MAX_DIMENSION",
            "IMAGE_DECODE_TIMEOUT",
            "WORD_FREQUENCY_LIMIT",
            "KEY_PHRASE_LIMIT",
            "PDF_MAX_PAGES",
        ],
    )
    def test_zero_rejected(self, monkeypatch: pytest.MonkeyPatch, env_var: str) -> None:
        monkeypatch.setenv(env_var, "0")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)  # type: ignore[call-arg]

    def test_unknown_env_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GLIMPSE_ENV", "qa")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)  # type: ignore[call-arg]


class TestDefaults:
    def test_defaults(self) -> None:
        settings = Settings.model_construct()

        assert settings.env == "development"
        assert settings.max_upload_bytes == DEFAULT_MAX_UPLOAD_BYTES
        assert settings.image_max_dimension == IMAGE_MAX_DIMENSION
        assert settings.random_seed is None
        assert not settings.is_production

    def test_is_production(self) -> None:
        assert Settings.model_construct(env="production").is_production

    def test_get_settings_cached(self) -> None:
        get_settings.cache_clear()
        try:
            assert get_settings() is get_settings()
        finally:
            get_settings.cache_clear()


# ─────────────────────────────────────────────────────────────
# Comprehensive env-var loading test
# ─────────────────────────────────────────────────────────────

# Every Settings field mapped to (ENV_VAR_NAME, test_value_string, expected_python_value).
# Aliased fields use their alias; all others use UPPER_CASE(field_name).
_ENV_FIELD_SPECS: list[tuple[str, str, str, object]] = [
    # (field_name, env_var_name, env_string_value, expected_value)
    # --- Core (aliased) ---
    ("env", "GLIMPSE_ENV", "staging", "staging"),
    ("debug", "GLIMPSE_DEBUG", "true", True),
    ("log_level", "GLIMPSE_LOG_LEVEL", "WARNING", "WARNING"),
    # --- Input ceilings ---
    ("max_upload_bytes", "MAX_UPLOAD_BYTES", "2048", 2048),
    ("max_text_chars", "MAX_TEXT_CHARS", "500", 500),
    # --- Image classifier ---
    ("image_max_dimension", "IMAGE_MAX_DIMENSION", "64", 64),
    ("image_decode_timeout", "IMAGE_DECODE_TIMEOUT", "2.5", 2.5),
    ("random_seed", "RANDOM_SEED", "42", 42),
    # --- Text analysis ---
    ("word_frequency_limit", "WORD_FREQUENCY_LIMIT", "20", 20),
    ("key_phrase_limit", "KEY_PHRASE_LIMIT", "4", 4),
    ("lexicon_path", "LEXICON_PATH", "/tmp/lexicon.json", Path("/tmp/lexicon.json")),
    # --- Documents ---
    ("pdf_max_pages", "PDF_MAX_PAGES", "10", 10),
]


class TestSettingsEnvLoading:
    """Verify every Settings field can be loaded from its env var."""

    def test_all_fields_loadable(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Set every env var, create Settings, assert each field got the value."""
        for _field, env_var, env_val, _expected in _ENV_FIELD_SPECS:
            monkeypatch.setenv(env_var, env_val)

        # Create settings without reading .env file
        settings = Settings(_env_file=None)  # type: ignore[call-arg]

        for field_name, env_var, _env_val, expected in _ENV_FIELD_SPECS:
            actual = getattr(settings, field_name)
            assert actual == expected, (
                f"Field {field_name!r} (env={env_var}): expected {expected!r}, got {actual!r}"
            )

    def test_field_spec_covers_all_settings_fields(self) -> None:
        """Ensure _ENV_FIELD_SPECS covers every field in Settings."""
        model_fields = set(Settings.model_fields.keys())
        spec_fields = {field_name for field_name, *_ in _ENV_FIELD_SPECS}
        missing = model_fields - spec_fields
        assert not missing, (
            f"Fields missing from _ENV_FIELD_SPECS: {missing}. "
            "Add them to keep the env-loading test comprehensive."
        )
