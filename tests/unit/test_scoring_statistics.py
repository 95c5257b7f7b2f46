"""
Unit tests for vocabulary construction and frequency statistics.
"""

import pytest
from ir_lab.scoring.statistics import (
    FrequencyTable,
    compute_frequency_table,
    document_frequency,
    normalized_frequency,
    raw_count,
)
from ir_lab.scoring.tokenizer import tokenize
from ir_lab.scoring.vocabulary import VocabularyScope, build_vocabulary


class TestVocabulary:
    """Test vocabulary scope policies and ordering"""

    def test_union_first_occurrence_order(self):
        """Test union vocabulary keeps first-seen order across sequences"""
        sequences = [["fox", "quick"], ["quick", "brown", "fox"], ["dog"]]
        assert build_vocabulary(sequences, VocabularyScope.UNION) == [
            "fox", "quick", "brown", "dog"
        ]

    def test_query_only_scope(self):
        """Test query-only vocabulary ignores document terms"""
        sequences = [["the", "quick", "the", "fox"], ["lazy", "dog"]]
        assert build_vocabulary(sequences, VocabularyScope.QUERY_ONLY) == [
            "the", "quick", "fox"
        ]

    def test_scope_accepts_string_values(self):
        """Test scope can be passed by value"""
        sequences = [["a"], ["b"]]
        assert build_vocabulary(sequences, "query-only") == ["a"]
        assert build_vocabulary(sequences, "union") == ["a", "b"]

    def test_unknown_scope_rejected(self):
        """Test an unknown scope name raises"""
        with pytest.raises(ValueError):
            build_vocabulary([["a"]], "everything")

    def test_empty_inputs(self):
        """Test no sequences or empty sequences give an empty vocabulary"""
        assert build_vocabulary([], VocabularyScope.UNION) == []
        assert build_vocabulary([[], []], VocabularyScope.QUERY_ONLY) == []

    def test_deterministic(self):
        """Test repeated builds over the same tokens are identical"""
        sequences = [tokenize("b a c a"), tokenize("d c b")]
        assert build_vocabulary(sequences) == build_vocabulary(sequences)


class TestTermStatistics:
    """Test raw count, normalized frequency and document frequency"""

    def test_raw_count(self):
        """Test occurrence counting"""
        tokens = ["cat", "dog", "cat"]
        assert raw_count("cat", tokens) == 2
        assert raw_count("fish", tokens) == 0

    def test_normalized_frequency(self):
        """Test count divided by length"""
        assert normalized_frequency("cat", ["cat", "dog", "cat", "cow"]) == 0.5

    def test_normalized_frequency_empty_document(self):
        """Test empty documents have frequency 0 instead of dividing by zero"""
        assert normalized_frequency("cat", []) == 0.0

    def test_document_frequency_counts_documents_not_occurrences(self):
        """Test df counts each document once"""
        documents = [["cat", "cat", "cat"], ["cat"], ["dog"]]
        assert document_frequency("cat", documents) == 2
        assert document_frequency("dog", documents) == 1
        assert document_frequency("cow", documents) == 0


class TestFrequencyTable:
    """Test compute_frequency_table"""

    def test_table_contents(self):
        """Test tf/df/lengths over a small collection"""
        documents = [tokenize("a quick brown fox jumps"), tokenize("lazy dogs sleep all day")]
        table = compute_frequency_table(["the", "quick", "fox"], documents)

        assert table.tf == {"the": [0, 0], "quick": [1, 0], "fox": [1, 0]}
        assert table.df == {"the": 0, "quick": 1, "fox": 1}
        assert table.doc_lengths == [5, 5]
        assert table.avg_doc_length == 5.0
        assert table.n == 2

    def test_df_bounded_by_collection_size(self):
        """Test 0 <= df <= N for every term"""
        documents = [tokenize("x y x"), tokenize("y z"), tokenize("")]
        table = compute_frequency_table(["x", "y", "z", "w"], documents)
        for term in table.vocabulary:
            assert 0 <= table.df[term] <= table.n

    def test_table_lookups(self):
        """Test raw_count and normalized_frequency by document index"""
        table = compute_frequency_table(["cat"], [["cat", "cat", "dog", "cow"], []])
        assert table.raw_count("cat", 0) == 2
        assert table.normalized_frequency("cat", 0) == 0.5
        assert table.normalized_frequency("cat", 1) == 0.0
        assert table.raw_count("unknown", 0) == 0

    def test_average_length(self):
        """Test avgdl is the mean token count"""
        table = compute_frequency_table([], [["a"], ["a", "b", "c"]])
        assert table.avg_doc_length == pytest.approx(2.0)

    def test_no_documents(self):
        """Test an empty collection"""
        table = compute_frequency_table(["cat"], [])
        assert table == FrequencyTable(
            vocabulary=["cat"], tf={"cat": []}, df={"cat": 0}, doc_lengths=[], avg_doc_length=0.0
        )
