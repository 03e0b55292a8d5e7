"""Which analysis tab is enabled, visible and active."""

from __future__ import annotations

from seo_sync.errors import InactiveDimensionError
from seo_sync.obs.log import get_logger
from seo_sync.types import AnalysisDimension, AnalysisMode

logger = get_logger(__name__)


class TabStateManager:
    """Finite-state controller over the keyword and content tabs.

    The enable flags are fixed for the session. The visible selector starts
    at neither and moves only through the ``activate_*`` operations.
    Activating a disabled tab raises in strict mode and is logged and ignored
    otherwise.
    """

    def __init__(
        self,
        *,
        keyword_enabled: bool,
        content_enabled: bool,
        strict: bool = False,
    ) -> None:
        self._enabled = {
            AnalysisDimension.KEYWORD: keyword_enabled,
            AnalysisDimension.CONTENT: content_enabled,
        }
        self._strict = strict
        self._active: AnalysisDimension | None = None
        self._hidden_tabs: set[AnalysisDimension] = {
            dimension for dimension, enabled in self._enabled.items() if not enabled
        }
        self.add_keyword_visible = True
        self.keyword_from_element = ""

    @property
    def mode(self) -> AnalysisMode:
        return AnalysisMode.from_flags(
            keyword=self._enabled[AnalysisDimension.KEYWORD],
            content=self._enabled[AnalysisDimension.CONTENT],
        )

    @property
    def active_dimension(self) -> AnalysisDimension | None:
        return self._active

    def is_enabled(self, dimension: AnalysisDimension) -> bool:
        return self._enabled[dimension]

    def is_tab_visible(self, dimension: AnalysisDimension) -> bool:
        return dimension not in self._hidden_tabs

    def activate_keyword_tab(self) -> None:
        self._activate(AnalysisDimension.KEYWORD)

    def activate_content_tab(self) -> None:
        self._activate(AnalysisDimension.CONTENT)

    def hide_add_keyword(self) -> None:
        self.add_keyword_visible = False

    def set_keyword_from_element(self, keyword: str) -> None:
        """Record what the user typed into the visible focus keyword input."""
        self.keyword_from_element = keyword

    def _activate(self, dimension: AnalysisDimension) -> None:
        if not self._enabled[dimension]:
            message = f"Cannot activate the {dimension.value} tab: analysis is disabled"
            if self._strict:
                raise InactiveDimensionError(message)
            logger.error(message)
            return
        self._active = dimension
