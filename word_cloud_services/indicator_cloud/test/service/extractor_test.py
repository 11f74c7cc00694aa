""" Word extractor test cases
"""
import pandas as pd
import pytest
from ...app.service.extractor import WordExtractor, contains_substring, unique


@pytest.fixture
def extractor():
    return WordExtractor()


def test_tokenize_replaces_non_alphabetic_characters(extractor):
    assert extractor.tokenize("Under-5 mortality rate (per 1,000)") == [
        "under", "mortality", "rate", "per"]


def test_extract_returns_unique_alphabetic_tokens(extractor):
    rows = [
        {"indicator_name": "Births attended by skilled health personnel (%)"},
        {"indicator_name": "Health expenditure, % of GDP"},
        {"indicator_name": "GDP per capita 2020"},
    ]
    vocabulary = extractor.extract(rows, "indicator_name")

    assert len(vocabulary) == len(set(vocabulary))
    assert all(token.isalpha() and token.islower() for token in vocabulary)
    assert vocabulary == ["births", "attended", "by", "skilled", "health",
                          "personnel", "expenditure", "of", "gdp", "per", "capita"]


def test_malformed_rows_contribute_no_tokens(extractor):
    rows = [
        {"indicator_name": float("nan")},
        {"other_field": "ignored words"},
        {"indicator_name": None},
        "not a row",
        {"indicator_name": "123 %%"},
        {"indicator_name": "Stunting"},
    ]
    assert extractor.extract(rows, "indicator_name") == ["stunting"]


def test_literacy_rate_subsets(extractor, literacy_rows):
    assert set(extractor.extract(literacy_rows, "indicator_name")) == {
        "male", "literacy", "rate", "female", "adult"}
    assert extractor.subset(literacy_rows, "indicator_name", "male") == [
        "male", "literacy", "rate"]
    assert extractor.subset(literacy_rows, "indicator_name", "female") == [
        "female", "literacy", "rate"]


def test_classify_with_predicate(extractor):
    vocabulary = ["male", "female", "literacy", "maleness"]
    assert extractor.classify(vocabulary, contains_substring("male")) == [
        "male", "female", "maleness"]
    assert extractor.classify(vocabulary, lambda token: len(token) > 6) == [
        "literacy", "maleness"]
    assert extractor.classify([], contains_substring("male")) == []


def test_load_rows_reads_csv(tmp_path):
    dataset = tmp_path / "indicators.csv"
    pd.DataFrame({
        "indicator_name": ["Male literacy rate", "Female literacy rate"],
        "value": [90.5, 88.1],
    }).to_csv(dataset, index=False)

    rows = WordExtractor().load_rows(str(dataset))

    assert len(rows) == 2
    assert rows[0]["indicator_name"] == "Male literacy rate"


def test_unique_keeps_first_occurrence_order():
    assert unique(["rate", "male", "rate", "adult", "male"]) == ["rate", "male", "adult"]
