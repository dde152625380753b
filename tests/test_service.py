import threading

import pytest

from polytonic_keyboard import PreferenceTracker, SuggestionService

VOWELS = ["α", "ε", "η", "ι", "ο", "υ", "ω", "ρ"]


# ---------------------------------------------------------------------
# get_variants
# ---------------------------------------------------------------------
def test_fresh_engine_falls_back_to_catalog_order(service):
    for vowel in VOWELS:
        assert service.get_variants(vowel) == service.catalog.variants_of(vowel)


def test_variants_are_capped_and_known(service):
    for vowel in VOWELS:
        variants = service.get_variants(vowel)
        assert len(variants) <= 8
        assert set(variants) <= set(service.catalog.variants_of(vowel))


def test_rho(service):
    service.learn_from_text("ῥήτωρ")
    assert service.get_variants("ρ") == ["ῥ", "Ῥ"]
    assert service.catalog.variants_of("ρ") == ["ῥ", "Ῥ"]


def test_unknown_vowel(service):
    assert service.get_variants("β") == []
    assert service.get_variants("") == []


def test_uppercase_key_uses_lowercase_vowel(service):
    assert service.get_variants("Α") == service.get_variants("α")


def test_get_variants_is_deterministic(service):
    service.record_selection("ἁ", "α")
    assert service.get_variants("α") == service.get_variants("α")


def test_most_selected_variant_ranks_first(service):
    service.record_selection("ἅ", "α")
    service.record_selection("ἅ", "α")
    service.record_selection("ἄ", "α")
    assert service.get_variants("α")[:2] == ["ἅ", "ἄ"]


def test_oxia_selection_boosts_catalog_form(service):
    service.record_selection("\u1f75", "η")
    service.record_selection("\u1f75", "η")

    variants = service.get_variants("η")
    assert variants[0] == "\u03ae"
    assert len(set(variants)) == len(variants)
    assert "\u1f75" not in variants


def test_recorded_uncommon_variant_can_be_offered(service):
    for _ in range(2):
        service.record_selection("ἂ", "α")

    variants = service.get_variants("α")
    assert variants[0] == "ἂ"
    assert len(variants) == 8


def test_learned_text_takes_precedence(service):
    service.learn_from_text("ἀλλά")
    for _ in range(5):
        service.record_selection("ᾳ", "α")

    assert service.get_variants("α") == ["ἀ", "ἁ", "ά", "ἄ", "ὰ", "ἅ"]
    # Other vowels still follow selections
    service.record_selection("ὡ", "ω")
    assert service.get_variants("ω")[0] == "ὡ"


def test_catalog_fallback_when_tracker_is_empty(catalog):
    service = SuggestionService(catalog=catalog, tracker=PreferenceTracker())
    assert service.get_variants("η") == catalog.variants_of("η")


# ---------------------------------------------------------------------
# Forwarding
# ---------------------------------------------------------------------
def test_record_selection_only_touches_tracker(service):
    before = dict(service.model.diacritic_frequencies["α"])
    service.record_selection("ἀ", "α")
    assert dict(service.model.diacritic_frequencies["α"]) == before
    assert service.tracker.count("α", "ἀ") == 2


def test_learn_from_text_only_touches_model(service):
    service.learn_from_text("ἀλλά ἀλλά")
    assert service.tracker.count("α", "ἀ") == 1
    assert service.model.word_count("ἀλλά") == 12


def test_word_suggestion_round_trip(service):
    service.learn_from_text("καί καί καί")
    assert service.get_word_suggestions("κα") == ["καί"]


def test_next_character_round_trip(service):
    for _ in range(5):
        service.learn_from_text("ανθρωπος")
    assert service.get_next_character_predictions("αν", 1) == ["θ"]


def test_empty_input_safety(service):
    assert service.get_word_suggestions("", 3) == []
    assert service.get_next_character_predictions("α", 3) == []
    service.learn_from_text("")
    service.learn_from_text("  ")


def test_default_limit_is_three(service):
    service.learn_from_text("παα παβ παγ παδ")
    assert service.get_word_suggestions("πα") == ["παα", "παβ", "παγ"]

    service.learn_from_text("ξξα ξξβ ξξγ ξξδ")
    assert len(service.get_next_character_predictions("ξξ")) == 3


def test_popup_labels(service):
    assert service.hint_for("ᾳ") == "iota"
    assert service.describe_variant("ά") == "Acute accent (oxia) - rising tone"


# ---------------------------------------------------------------------
# Instances and threads
# ---------------------------------------------------------------------
def test_services_do_not_share_state():
    first = SuggestionService()
    second = SuggestionService()
    first.record_selection("ἅ", "α")
    first.learn_from_text("λόγος")

    assert second.get_variants("α") == second.catalog.variants_of("α")
    assert second.get_word_suggestions("λό") == []


@pytest.mark.parametrize("thread_safe", [True, False])
def test_thread_safe_flag(thread_safe):
    service = SuggestionService(thread_safe=thread_safe)
    assert service.get_word_suggestions("κα") == ["καί"]


def test_no_lost_updates_with_lock():
    service = SuggestionService(thread_safe=True)

    def worker():
        for _ in range(200):
            service.learn_from_text("λόγος")
            service.record_selection("ὁ", "ο")
            service.get_variants("ο")

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert service.model.word_count("λόγος") == 800
    assert service.tracker.count("ο", "ὁ") == 801
