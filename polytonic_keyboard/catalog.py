"""
Polytonic variant catalog.

Static reference data for the long-press popup: every base vowel maps to
an ordered list of its canonical diacritic forms, and every form carries
a fixed set of mark tags derived from its Unicode decomposition.

Canonical order (also the tie-break order for every ranking):
    acute, grave, circumflex, smooth, rough,
    smooth+acute, rough+acute, iota subscript
Forms a vowel does not take are skipped, so no list exceeds 8 entries.
"""

import unicodedata

# ---------------------------------------------------------------------
# VARIANT TABLE
# ---------------------------------------------------------------------
VOWEL_VARIANTS = {
    "α": ["ά", "ὰ", "ᾶ", "ἀ", "ἁ", "ἄ", "ἅ", "ᾳ"],
    "ε": ["έ", "ὲ", "ἐ", "ἑ", "ἔ", "ἕ"],
    "η": ["ή", "ὴ", "ῆ", "ἠ", "ἡ", "ἤ", "ἥ", "ῃ"],
    "ι": ["ί", "ὶ", "ῖ", "ἰ", "ἱ", "ἴ", "ἵ"],
    "ο": ["ό", "ὸ", "ὀ", "ὁ", "ὄ", "ὅ"],
    "υ": ["ύ", "ὺ", "ῦ", "ὐ", "ὑ", "ὔ", "ὕ"],
    "ω": ["ώ", "ὼ", "ῶ", "ὠ", "ὡ", "ὤ", "ὥ", "ῳ"],
    # Rho only takes the rough breathing (lowercase, uppercase)
    "ρ": ["ῥ", "Ῥ"],
}

# ---------------------------------------------------------------------
# DIACRITIC MARKS
# ---------------------------------------------------------------------
ACUTE = "acute"
GRAVE = "grave"
CIRCUMFLEX = "circumflex"
SMOOTH = "smooth-breathing"
ROUGH = "rough-breathing"
IOTA_SUBSCRIPT = "iota-subscript"
PLAIN = "plain"

COMBINING_MARKS = {
    ACUTE: "\u0301",
    GRAVE: "\u0300",
    CIRCUMFLEX: "\u0342",
    SMOOTH: "\u0313",
    ROUGH: "\u0314",
    IOTA_SUBSCRIPT: "\u0345",
}

_TAG_FOR_COMBINING = {mark: tag for tag, mark in COMBINING_MARKS.items()}
_APPLY_ORDER = (SMOOTH, ROUGH, ACUTE, GRAVE, CIRCUMFLEX, IOTA_SUBSCRIPT)

# Popup hint labels, first match wins
HINT_LABELS = [
    (IOTA_SUBSCRIPT, "iota"),
    (SMOOTH, "smooth"),
    (ROUGH, "rough"),
    (ACUTE, "acute"),
    (CIRCUMFLEX, "circum"),
    (GRAVE, "grave"),
]

DESCRIPTIONS = [
    (ACUTE, "Acute accent (oxia) - rising tone"),
    (GRAVE, "Grave accent (varia) - falling tone"),
    (CIRCUMFLEX, "Circumflex (perispomeni) - rising-falling tone"),
    (SMOOTH, "Smooth breathing (psili) - h sound is absent"),
    (ROUGH, "Rough breathing (dasia) - h sound is present"),
    (IOTA_SUBSCRIPT, "Iota subscript (ypogegrammeni) - old long diphthong"),
]
DEFAULT_DESCRIPTION = "Polytonic Greek character"


class UnknownMarkError(KeyError):
    """Raised when asked to apply a mark outside the closed tag set."""


def nfc(text):
    return unicodedata.normalize("NFC", text)


def decompose_marks(char):
    """
    Tags for the combining marks in a character's canonical decomposition.

    The Greek tonos (U+0301 after NFD) and oxia both come out as acute.
    A character with none of the tracked marks is plain.
    """
    tags = {
        _TAG_FOR_COMBINING[c]
        for c in unicodedata.normalize("NFD", char)
        if c in _TAG_FOR_COMBINING
    }
    return frozenset(tags) if tags else frozenset([PLAIN])


def apply_marks(base, *tags):
    """
    Put combining marks on a base letter and return the composed form.

    apply_marks("α", "smooth-breathing", "acute") -> "ἄ"

    Used by the standalone accent and breathing keys, which act on the
    letter just typed.
    """
    for tag in tags:
        if tag not in COMBINING_MARKS:
            raise UnknownMarkError(tag)

    decomposed = unicodedata.normalize("NFD", base)
    letters = [c for c in decomposed if c not in _TAG_FOR_COMBINING]
    wanted = {_TAG_FOR_COMBINING[c] for c in decomposed if c in _TAG_FOR_COMBINING}
    wanted.update(tags)

    # Breathing must precede the accent or NFC will not compose them
    marks = "".join(COMBINING_MARKS[tag] for tag in _APPLY_ORDER if tag in wanted)
    return nfc("".join(letters) + marks)


class VariantCatalog:
    """Base vowel -> ordered canonical diacritic forms, fixed for the process."""

    def __init__(self, table=None):
        source = VOWEL_VARIANTS if table is None else table
        self._variants = {nfc(vowel): [nfc(v) for v in forms] for vowel, forms in source.items()}

        # Reverse lookups, built once
        self._base = {}
        self._position = {}
        self._marks = {}
        for vowel, forms in self._variants.items():
            for index, variant in enumerate(forms):
                self._base[variant] = vowel
                self._position[(vowel, variant)] = index
                self._marks[variant] = decompose_marks(variant)

    def __contains__(self, vowel):
        return vowel in self._variants

    def vowels(self):
        return list(self._variants)

    def variants_of(self, vowel):
        """Canonical forms for a vowel; an unknown character yields []."""
        return list(self._variants.get(vowel, []))

    def base_of(self, variant):
        return self._base.get(nfc(variant))

    def position(self, vowel, variant):
        """Canonical index of a variant; anything outside the catalog sorts last."""
        return self._position.get((vowel, variant), len(self._variants.get(vowel, [])))

    # -----------------------------------------------------------------
    # Mark table
    # -----------------------------------------------------------------
    def marks_of(self, char):
        char = nfc(char)
        if char in self._marks:
            return self._marks[char]
        return frozenset([PLAIN])

    def hint_for(self, char):
        marks = self.marks_of(char)
        for tag, label in HINT_LABELS:
            if tag in marks:
                return label
        return None

    def describe(self, char):
        marks = self.marks_of(char)
        for tag, text in DESCRIPTIONS:
            if tag in marks:
                return text
        return DEFAULT_DESCRIPTION
