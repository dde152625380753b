"""
Suggestion service: the only object a keyboard host talks to.

    service = SuggestionService()
    service.get_variants("α")                 # long-press popup
    service.record_selection("ἀ", "α")        # user picked from the popup
    service.learn_from_text("ἀλλὰ καὶ")       # word or line committed
    service.get_word_suggestions("ἀλ")        # completion bar
    service.get_next_character_predictions("ἀλ")

Variant ranking precedence, first non-empty list wins:
    1. Diacritic frequencies learned from typed text
    2. Explicit popup selections
    3. Catalog default order
"""

import contextlib
import threading

from .catalog import VariantCatalog
from .config import DEFAULT_SUGGESTION_LIMIT, MAX_VARIANTS
from .predictor import PredictiveTextModel
from .preferences import PreferenceTracker


class SuggestionService:
    def __init__(self, catalog=None, tracker=None, model=None, thread_safe=False):
        self.catalog = catalog if catalog is not None else VariantCatalog()
        self.tracker = tracker if tracker is not None else PreferenceTracker(self.catalog)
        self.model = model if model is not None else PredictiveTextModel(self.catalog)

        # One lock over every table when the host calls from several threads
        self._lock = threading.Lock() if thread_safe else contextlib.nullcontext()

    @staticmethod
    def _base(vowel):
        # The keyboard lowercases the pressed key before lookup
        return vowel.lower() if len(vowel) == 1 else vowel

    def get_variants(self, vowel):
        vowel = self._base(vowel)
        with self._lock:
            # The seeded prior alone is not evidence of what this user types
            if self.model.has_learned_variants(vowel):
                learned = self.model.suggest_diacritic_variants(vowel, MAX_VARIANTS)
                if learned:
                    return learned

            preferred = self.tracker.ranked_variants(vowel, MAX_VARIANTS)
            if preferred:
                return preferred

            return self.catalog.variants_of(vowel)[:MAX_VARIANTS]

    def record_selection(self, selected, vowel):
        with self._lock:
            self.tracker.record(self._base(vowel), selected)

    def learn_from_text(self, text):
        with self._lock:
            self.model.learn(text)

    def get_word_suggestions(self, prefix, limit=DEFAULT_SUGGESTION_LIMIT):
        with self._lock:
            return self.model.suggest_words(prefix, limit)

    def get_next_character_predictions(self, text, limit=DEFAULT_SUGGESTION_LIMIT):
        with self._lock:
            return self.model.predict_next_characters(text, limit)

    # -----------------------------------------------------------------
    # Popup labels
    # -----------------------------------------------------------------
    def hint_for(self, variant):
        return self.catalog.hint_for(variant)

    def describe_variant(self, variant):
        return self.catalog.describe(variant)
