"""Configuration models for the live analysis layer."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

KEYWORD_TARGET = "output"
CONTENT_TARGET = "contentOutput"


def _flag(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return bool(value)


class FieldIds(BaseModel):
    """Element ids of the host page fields this layer reads and writes."""

    model_config = ConfigDict(frozen=True)

    editor: str = "content"
    title: str = "title"
    excerpt: str = "excerpt"
    focus_keyword_input: str = "yoast_wpseo_focuskw_text_input"
    focus_keyword_hidden: str = "yoast_wpseo_focuskw"
    meta_description: str = "yoast_wpseo_metadesc"
    snippet_title: str = "yoast_wpseo_title"
    post_name: str = "post_name"
    slug_editable: str = "editable-post-name"
    slug_full: str = "editable-post-name-full"
    keyword_score: str = "yoast_wpseo_linkdex"
    content_score: str = "yoast_wpseo_content_score"

    def trigger_targets(self) -> list[str]:
        """Fields whose change schedules a re-analysis."""
        return [
            self.editor,
            self.focus_keyword_input,
            self.meta_description,
            self.excerpt,
            self.slug_editable,
            self.slug_full,
        ]


class DebounceConfig(BaseModel):
    """Quiet period before a burst of field changes triggers one refresh."""

    delay_seconds: float = Field(default=0.5, ge=0.0)


class AnalysisConfig(BaseModel):
    """Startup configuration, read once per editing session."""

    keyword_analysis_active: bool = True
    content_analysis_active: bool = True
    show_markers: bool = True
    multi_keyword: bool = False
    locale: str = Field(default="en_US", min_length=2)
    translations: dict[str, Any] | None = None
    saved_keyword_score: str | None = None
    saved_content_score: str | None = None
    post_id: str | None = None
    strict: bool = False
    targets: dict[str, str] = Field(
        default_factory=lambda: {
            KEYWORD_TARGET: "wpseo-pageanalysis",
            CONTENT_TARGET: "yoast-seo-content-analysis",
        }
    )
    indicator_strings: dict[str, str] | None = None
    field_ids: FieldIds = Field(default_factory=FieldIds)
    debounce: DebounceConfig = Field(default_factory=DebounceConfig)

    @field_validator(
        "keyword_analysis_active",
        "content_analysis_active",
        "show_markers",
        "multi_keyword",
        "strict",
        mode="before",
    )
    @classmethod
    def _coerce_flag(cls, value: Any) -> bool:
        return _flag(value)

    @field_validator("saved_keyword_score", "saved_content_score", "post_id", mode="before")
    @classmethod
    def _coerce_optional_text(cls, value: Any) -> str | None:
        if value is None:
            return None
        text = str(value).strip()
        return text or None

    @classmethod
    def from_localization(cls, payload: dict[str, Any], **overrides: Any) -> "AnalysisConfig":
        """Build a config from the host page's localization payload.

        The payload uses the host's own keys (``show_markers`` as ``"1"``,
        ``keywordAnalysisActive`` and so on); unknown keys are ignored.
        """

        data: dict[str, Any] = {
            "keyword_analysis_active": payload.get("keywordAnalysisActive", True),
            "content_analysis_active": payload.get("contentAnalysisActive", True),
            "show_markers": payload.get("show_markers", "1"),
            "multi_keyword": payload.get("multiKeyword", False),
            "locale": payload.get("locale", "en_US"),
            "translations": payload.get("translations"),
            "saved_keyword_score": payload.get("keyword_score"),
            "saved_content_score": payload.get("content_score"),
            "post_id": payload.get("post_id"),
        }
        data.update(overrides)
        return cls.model_validate(data)

    def usable_translations(self) -> dict[str, Any] | None:
        """Translations are only handed on when the bundle names its domain."""
        if self.translations is None or "domain" not in self.translations:
            return None
        return self.translations
