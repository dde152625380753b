import pytest

from polytonic_keyboard.catalog import (
    ACUTE,
    CIRCUMFLEX,
    GRAVE,
    IOTA_SUBSCRIPT,
    PLAIN,
    ROUGH,
    SMOOTH,
    UnknownMarkError,
    VariantCatalog,
    apply_marks,
)

VOWELS = ["α", "ε", "η", "ι", "ο", "υ", "ω"]


def marks_for(catalog, vowel):
    tags = set()
    for variant in catalog.variants_of(vowel):
        tags |= catalog.marks_of(variant)
    return tags


def test_rho_has_exactly_the_breathing_pair(catalog):
    assert catalog.variants_of("ρ") == ["ῥ", "Ῥ"]


def test_unknown_input_yields_empty(catalog):
    assert catalog.variants_of("β") == []
    assert catalog.variants_of("") == []
    assert catalog.variants_of("αε") == []


def test_vowel_lists_are_capped_at_eight(catalog):
    for vowel in VOWELS:
        variants = catalog.variants_of(vowel)
        assert 0 < len(variants) <= 8
        assert len(set(variants)) == len(variants)


def test_every_vowel_takes_breathings_and_acute(catalog):
    for vowel in VOWELS:
        tags = marks_for(catalog, vowel)
        assert {SMOOTH, ROUGH, ACUTE} <= tags


def test_iota_subscript_only_on_long_vowels(catalog):
    for vowel in ["α", "η", "ω"]:
        assert IOTA_SUBSCRIPT in marks_for(catalog, vowel)
    for vowel in ["ε", "ι", "ο", "υ"]:
        assert IOTA_SUBSCRIPT not in marks_for(catalog, vowel)


def test_no_circumflex_on_short_vowels(catalog):
    for vowel in ["ε", "ο"]:
        assert CIRCUMFLEX not in marks_for(catalog, vowel)
    for vowel in ["α", "η", "ι", "υ", "ω"]:
        assert CIRCUMFLEX in marks_for(catalog, vowel)


def test_variants_of_returns_a_copy(catalog):
    catalog.variants_of("α").clear()
    assert len(catalog.variants_of("α")) == 8


def test_base_of(catalog):
    assert catalog.base_of("ἄ") == "α"
    assert catalog.base_of("Ῥ") == "ρ"
    assert catalog.base_of("β") is None


def test_oxia_code_point_maps_to_tonos_entry(catalog):
    # U+1F71 GREEK SMALL LETTER ALPHA WITH OXIA normalizes to U+03AC
    assert catalog.base_of("\u1f71") == "α"
    assert catalog.marks_of("\u1f71") == frozenset([ACUTE])


def test_position_puts_unknown_variants_last(catalog):
    assert catalog.position("α", "ά") == 0
    assert catalog.position("α", "ᾳ") == 7
    assert catalog.position("α", "ἂ") == 8


def test_marks_of(catalog):
    assert catalog.marks_of("ἄ") == frozenset([SMOOTH, ACUTE])
    assert catalog.marks_of("ᾳ") == frozenset([IOTA_SUBSCRIPT])
    assert catalog.marks_of("ὼ") == frozenset([GRAVE])
    assert catalog.marks_of("β") == frozenset([PLAIN])


def test_hint_labels(catalog):
    assert catalog.hint_for("ᾳ") == "iota"
    assert catalog.hint_for("ἄ") == "smooth"
    assert catalog.hint_for("ἁ") == "rough"
    assert catalog.hint_for("ά") == "acute"
    assert catalog.hint_for("ᾶ") == "circum"
    assert catalog.hint_for("ὰ") == "grave"
    assert catalog.hint_for("α") is None


def test_describe(catalog):
    assert catalog.describe("ὰ") == "Grave accent (varia) - falling tone"
    assert catalog.describe("ἑ") == "Rough breathing (dasia) - h sound is present"
    assert catalog.describe("x") == "Polytonic Greek character"


def test_apply_marks_composes():
    assert apply_marks("α", SMOOTH, ACUTE) == "ἄ"
    assert apply_marks("ω", IOTA_SUBSCRIPT) == "ῳ"
    assert apply_marks("ρ", ROUGH) == "ῥ"
    assert apply_marks("η", CIRCUMFLEX) == "ῆ"


def test_apply_marks_ignores_mark_order():
    assert apply_marks("α", ACUTE, SMOOTH) == "ἄ"


def test_apply_marks_adds_to_existing_marks():
    assert apply_marks("ἀ", ACUTE) == "ἄ"
    assert apply_marks("ἁ", GRAVE, IOTA_SUBSCRIPT) == "ᾃ"


def test_apply_marks_unknown_tag():
    with pytest.raises(UnknownMarkError):
        apply_marks("α", "diaeresis")
    with pytest.raises(KeyError):
        apply_marks("α", PLAIN)


def test_custom_table():
    catalog = VariantCatalog({"α": ["ἀ", "ἁ"]})
    assert catalog.vowels() == ["α"]
    assert "α" in catalog
    assert "ε" not in catalog
    assert catalog.variants_of("ε") == []
