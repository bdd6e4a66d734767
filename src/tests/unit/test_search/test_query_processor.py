"""Unit tests for query normalization."""

import pytest

from site_search.config.settings import SearchConfig
from site_search.search.query_processor import (
    ProcessedQuery,
    QueryProcessor,
    normalize_query,
)


@pytest.fixture
def query_processor(search_config):
    """Create query processor instance for testing."""
    return QueryProcessor(search_config)


class TestQueryNormalization:
    """Test lowercasing, trimming and term splitting."""

    def test_lowercases_and_trims(self, query_processor):
        """Test lowercases and trims."""
        processed = query_processor.process_query("  Epilepsy Training  ")

        assert isinstance(processed, ProcessedQuery)
        assert processed.original_query == "  Epilepsy Training  "
        assert processed.normalized_query == "epilepsy training"
        assert processed.terms == ("epilepsy", "training")

    def test_splits_on_any_whitespace(self, query_processor):
        """Test splits on any whitespace."""
        processed = query_processor.process_query("child\tneurology \n  kenya")

        assert processed.terms == ("child", "neurology", "kenya")
        # Inner whitespace is preserved in the substring needle
        assert processed.normalized_query == "child\tneurology \n  kenya"

    @pytest.mark.parametrize("query", ["", "   ", "\t\n", None])
    def test_empty_queries(self, query_processor, query):
        """Test blank queries are empty."""
        processed = query_processor.process_query(query)

        assert processed.is_empty
        assert processed.terms == ()
        assert processed.fuzzy_terms == ()

    def test_single_term_is_not_multi_term(self, query_processor):
        """Test single term is not multi term."""
        assert not query_processor.process_query("membership").is_multi_term
        assert query_processor.process_query("membership faq").is_multi_term

    def test_normalize_query_helper(self):
        """Test normalize query helper."""
        assert normalize_query("  FAQ ") == "faq"


class TestFuzzyTerms:
    """Test selection of terms eligible for fuzzy matching."""

    def test_short_terms_are_excluded(self, query_processor):
        """Test short terms are excluded."""
        processed = query_processor.process_query("to be or pet training")

        assert processed.terms == ("to", "be", "or", "pet", "training")
        assert processed.fuzzy_terms == ("pet", "training")

    def test_minimum_length_is_configurable(self):
        """Test minimum length is configurable."""
        processor = QueryProcessor(SearchConfig(min_fuzzy_term_length=5))

        processed = processor.process_query("pet epilepsy")

        assert processed.fuzzy_terms == ("epilepsy",)
