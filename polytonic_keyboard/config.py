"""
Configuration for the polytonic keyboard engine.

Everything here is static: tables are read once when an engine is built
and never written back.
"""

MODEL_VERSION = "1.0_polytonic"

# Suggestions
MAX_VARIANTS = 8               # popup never shows more than this
DEFAULT_SUGGESTION_LIMIT = 3   # word completions / next-character bar

# Learning
BOOTSTRAP_WORD_COUNT = 10      # nominal count for every bootstrap word
PREFERENCE_PRIOR = 1           # uniform prior for every catalog variant
MIN_BIGRAM_WORD_LENGTH = 3     # shorter words add no bigram successors

# Corpus loading (Hugging Face datasets, name supplied by the host)
DEFAULT_DATASET_SPLIT = "train"
DEFAULT_TEXT_FIELD = "text"

# ---------------------------------------------------------------------
# BOOTSTRAP VOCABULARY
# ---------------------------------------------------------------------
# Forty of the most frequent words of Attic/Koine prose.
BOOTSTRAP_WORDS = [
    "καί", "δέ", "τε", "μέν", "γάρ", "οὐ", "τόν", "τῶν", "τό", "ἐν",
    "τῆς", "τούς", "τά", "ἐς", "πρός", "ὁ", "οἱ", "τοῦ", "τῇ", "αὐτόν",
    "ἀλλά", "τις", "οὕτως", "εἰς", "ταῦτα", "ἐπί", "αὐτῶν", "ἦν", "ὥστε", "αὐτοῦ",
    "ἄν", "περί", "αὐτῷ", "τοῖς", "οὐδέ", "πάντα", "αὐτήν", "Θεοῦ", "ἐάν", "ἵνα",
]

# ---------------------------------------------------------------------
# DIACRITIC USAGE PRIOR
# ---------------------------------------------------------------------
# Plausible usage weights for the six most common marked forms of each
# vowel. Catalog variants not listed here start at 0.
DIACRITIC_PRIOR = {
    "α": {"ά": 100, "ὰ": 80, "ἀ": 150, "ἁ": 120, "ἄ": 90, "ἅ": 70},
    "ε": {"έ": 100, "ὲ": 80, "ἐ": 150, "ἑ": 120, "ἔ": 90, "ἕ": 70},
    "η": {"ή": 100, "ὴ": 80, "ἠ": 150, "ἡ": 120, "ἤ": 90, "ἥ": 70},
    "ι": {"ί": 100, "ὶ": 80, "ἰ": 150, "ἱ": 120, "ἴ": 90, "ἵ": 70},
    "ο": {"ό": 100, "ὸ": 80, "ὀ": 150, "ὁ": 120, "ὄ": 90, "ὅ": 70},
    "υ": {"ύ": 100, "ὺ": 80, "ὐ": 150, "ὑ": 120, "ὔ": 90, "ὕ": 70},
    "ω": {"ώ": 100, "ὼ": 80, "ὠ": 150, "ὡ": 120, "ὤ": 90, "ὥ": 70},
}
