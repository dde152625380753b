"""
Predictive text model for polytonic Greek.

Holds all of the learned statistics:
    - word frequencies        (word completion)
    - character bigrams       (next-character prediction)
    - diacritic frequencies   (which marked form of a vowel gets typed)

Everything is counted in memory from the text the host passes to
learn(); nothing is written to disk.

Usage:
    model = PredictiveTextModel(VariantCatalog())
    model.learn("ἐν ἀρχῇ ἦν ὁ λόγος")
    model.suggest_words("ἀρ", 3)             # ["ἀρχῇ"]
    model.predict_next_characters("λό", 3)   # ["γ"]
"""

from collections import Counter, defaultdict

from .catalog import VariantCatalog, nfc
from .config import (
    BOOTSTRAP_WORD_COUNT,
    BOOTSTRAP_WORDS,
    DIACRITIC_PRIOR,
    MIN_BIGRAM_WORD_LENGTH,
)


class PredictiveTextModel:
    def __init__(self, catalog=None, bootstrap_words=None, diacritic_prior=None):
        self.catalog = catalog if catalog is not None else VariantCatalog()

        self.word_frequencies = Counter()
        self.char_bigrams = defaultdict(Counter)       # "λό" -> {"γ": 3}
        self.diacritic_frequencies = defaultdict(Counter)
        # Counts that came from learned text only, per vowel
        self.learned_diacritics = Counter()
        # variant -> base vowel, for the per-character scan
        self.tracked_variants = {}

        words = BOOTSTRAP_WORDS if bootstrap_words is None else bootstrap_words
        prior = DIACRITIC_PRIOR if diacritic_prior is None else diacritic_prior

        self._seed_words(words)
        self._seed_diacritics(prior)

    # -----------------------------------------------------------------
    # Bootstrap
    # -----------------------------------------------------------------
    def _seed_words(self, words):
        for word in words:
            self.word_frequencies[word] = BOOTSTRAP_WORD_COUNT
            self._build_char_bigrams(word)

    def _seed_diacritics(self, prior):
        for vowel, weights in prior.items():
            vowel = nfc(vowel)
            table = self.diacritic_frequencies[vowel]

            # Every catalog form is tracked; only the common ones get weight
            for variant in self.catalog.variants_of(vowel):
                table[variant] = 0
                self.tracked_variants[variant] = vowel
            for variant, weight in weights.items():
                variant = nfc(variant)
                table[variant] = weight
                self.tracked_variants[variant] = vowel

    # -----------------------------------------------------------------
    # Learning
    # -----------------------------------------------------------------
    def _build_char_bigrams(self, word):
        """
        Add every 2-character window of a word and the character after it.
        Example: "λόγος" -> "λό"→"γ", "όγ"→"ο", "γο"→"ς"
        """
        if len(word) < MIN_BIGRAM_WORD_LENGTH:
            return

        for i in range(len(word) - 2):
            self.char_bigrams[word[i:i + 2]][word[i + 2]] += 1

    def _learn_diacritics(self, text):
        for char in nfc(text):
            vowel = self.tracked_variants.get(char)
            if vowel is not None:
                self.diacritic_frequencies[vowel][char] += 1
                self.learned_diacritics[vowel] += 1

    def learn(self, text):
        """Update every table from a piece of committed text."""
        words = text.split()
        if not words:
            return

        for word in words:
            self.word_frequencies[word] += 1
            self._build_char_bigrams(word)

        self._learn_diacritics(text)

    # -----------------------------------------------------------------
    # Queries
    # -----------------------------------------------------------------
    def suggest_words(self, prefix, limit):
        if not prefix or limit <= 0:
            return []

        matches = [word for word in self.word_frequencies if word.startswith(prefix)]
        matches.sort(key=lambda word: (-self.word_frequencies[word], word))
        return matches[:limit]

    def predict_next_characters(self, text, limit):
        if len(text) < 2 or limit <= 0:
            return []

        successors = self.char_bigrams.get(text[-2:])
        if not successors:
            return []

        ranked = sorted(successors, key=lambda char: (-successors[char], char))
        return ranked[:limit]

    def suggest_diacritic_variants(self, vowel, limit):
        if limit <= 0 or vowel not in self.diacritic_frequencies:
            return []

        table = self.diacritic_frequencies[vowel]
        ranked = sorted(
            (variant for variant, count in table.items() if count > 0),
            key=lambda variant: (-table[variant], self.catalog.position(vowel, variant)),
        )
        return ranked[:limit]

    def has_learned_variants(self, vowel):
        """True once learned text (not the prior) has counted a form of this vowel."""
        return self.learned_diacritics[vowel] > 0

    # -----------------------------------------------------------------
    # Inspection
    # -----------------------------------------------------------------
    def word_count(self, word):
        return self.word_frequencies.get(word, 0)

    def successors(self, key):
        return dict(self.char_bigrams.get(key, {}))

    @property
    def vocabulary_size(self):
        return len(self.word_frequencies)
