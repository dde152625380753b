"""Predictive input engine for a polytonic Greek keyboard."""

from .catalog import VariantCatalog, apply_marks
from .predictor import PredictiveTextModel
from .preferences import PreferenceTracker
from .service import SuggestionService

__all__ = [
    "VariantCatalog",
    "PreferenceTracker",
    "PredictiveTextModel",
    "SuggestionService",
    "apply_marks",
]
