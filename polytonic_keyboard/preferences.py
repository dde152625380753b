"""
Per-vowel selection history.

Every time the user picks a form from the long-press popup the pick is
counted here, so the popup can put the user's habitual forms first.
"""

from collections import Counter, defaultdict

from .catalog import nfc
from .config import PREFERENCE_PRIOR


class PreferenceTracker:
    def __init__(self, catalog=None):
        self.catalog = catalog
        self.counts = defaultdict(Counter)   # vowel -> {variant: count}
        # Variants picked outside the catalog, in first-picked order
        self.extra_variants = defaultdict(list)

        if catalog is not None:
            self.initialize(catalog)

    def initialize(self, catalog):
        """Seed a uniform prior so ranking is defined before any selection."""
        self.catalog = catalog
        for vowel in catalog.vowels():
            for variant in catalog.variants_of(vowel):
                # Already-tracked counts survive a re-seed
                self.counts[vowel].setdefault(variant, PREFERENCE_PRIOR)

    def record(self, vowel, variant):
        """
        Count one explicit selection of `variant` for `vowel`.

        A variant that was never tracked for this vowel enters at 0 and is
        then incremented, so its first selection leaves it at exactly 1.
        It is tracked and ranked from then on, but never added to the
        catalog's default list.
        Input is NFC-normalised, so an oxia form counts toward the tonos one.
        """
        vowel, variant = nfc(vowel), nfc(variant)
        tracked = self.counts[vowel]
        if variant not in tracked:
            tracked[variant] = 0
            self.extra_variants[vowel].append(variant)
            print(f"🎓 Tracking uncommon variant '{variant}' for '{vowel}'")
        tracked[variant] += 1

    def count(self, vowel, variant):
        vowel, variant = nfc(vowel), nfc(variant)
        if vowel not in self.counts:
            return 0
        return self.counts[vowel].get(variant, 0)

    def _tie_break(self, vowel, variant):
        if self.catalog is not None and variant in self.catalog.variants_of(vowel):
            return (0, self.catalog.position(vowel, variant))
        extras = self.extra_variants.get(vowel, [])
        return (1, extras.index(variant) if variant in extras else len(extras))

    def ranked_variants(self, vowel, limit):
        """Top `limit` variants by selection count, ties in catalog order."""
        if limit <= 0 or vowel not in self.counts:
            return []

        tracked = self.counts[vowel]
        ranked = sorted(
            tracked,
            key=lambda variant: (-tracked[variant], self._tie_break(vowel, variant)),
        )
        return ranked[:limit]
