"""Live post-analysis synchronization layer."""

from .config import AnalysisConfig, DebounceConfig, FieldIds
from .core.orchestrator import Orchestrator
from .core.session import EditingSession

__all__ = ["AnalysisConfig", "DebounceConfig", "EditingSession", "FieldIds", "Orchestrator"]
