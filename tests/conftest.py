import pytest

from polytonic_keyboard import PredictiveTextModel, SuggestionService, VariantCatalog


@pytest.fixture
def catalog():
    return VariantCatalog()


@pytest.fixture
def model(catalog):
    return PredictiveTextModel(catalog)


@pytest.fixture
def empty_model(catalog):
    """Model without bootstrap words, for exact counting."""
    return PredictiveTextModel(catalog, bootstrap_words=[])


@pytest.fixture
def service():
    return SuggestionService()
