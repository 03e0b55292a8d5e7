"""Shared domain models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class AnalysisDimension(str, Enum):
    KEYWORD = "keyword"
    CONTENT = "content"


class IndicatorLevel(str, Enum):
    NO_DATA = "no_data"
    BAD = "bad"
    OK = "ok"
    GOOD = "good"


class AnalysisMode(str, Enum):
    """Closed set of dimension combinations, computed once at startup."""

    KEYWORD_ONLY = "keyword_only"
    CONTENT_ONLY = "content_only"
    BOTH = "both"
    NEITHER = "neither"

    @classmethod
    def from_flags(cls, *, keyword: bool, content: bool) -> "AnalysisMode":
        if keyword and content:
            return cls.BOTH
        if keyword:
            return cls.KEYWORD_ONLY
        if content:
            return cls.CONTENT_ONLY
        return cls.NEITHER

    @property
    def dimensions(self) -> tuple[AnalysisDimension, ...]:
        if self is AnalysisMode.BOTH:
            return (AnalysisDimension.KEYWORD, AnalysisDimension.CONTENT)
        if self is AnalysisMode.KEYWORD_ONLY:
            return (AnalysisDimension.KEYWORD,)
        if self is AnalysisMode.CONTENT_ONLY:
            return (AnalysisDimension.CONTENT,)
        return ()

    def includes(self, dimension: AnalysisDimension) -> bool:
        return dimension in self.dimensions


@dataclass(slots=True, frozen=True)
class DocumentSnapshot:
    """Immutable capture of the editable fields for one analysis cycle."""

    snapshot_id: int
    title: str
    body_text: str
    excerpt: str
    focus_term: str
    url_path: str
    meta_description: str


@dataclass(slots=True, frozen=True)
class ScoreIndicator:
    level: IndicatorLevel
    display_class: str
    screen_reader_text: str = ""


@dataclass(slots=True)
class UrlPathState:
    current_value: str
    is_user_edited: bool = False


@dataclass(slots=True, frozen=True)
class Mark:
    """A body-text range to highlight in the live editor."""

    start: int
    end: int
    metadata: dict[str, Any] = field(default_factory=dict, compare=False, hash=False)


MarkSet = tuple[Mark, ...]


@dataclass(slots=True, frozen=True)
class SnippetFields:
    title: str
    url_path: str
    meta_desc: str


@dataclass(slots=True, frozen=True)
class ScoreReport:
    """One asynchronous engine result, tagged with its originating snapshot."""

    dimension: AnalysisDimension
    snapshot_id: int
    raw_score: Any
    marks: MarkSet = ()
