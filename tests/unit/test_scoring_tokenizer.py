"""
Unit tests for the shared tokenizer.
"""

import pytest
from ir_lab.scoring.tokenizer import tokenize


class TestTokenizer:
    """Test lowercase Unicode letter/number/apostrophe tokenization"""

    def test_basic_tokenization(self):
        """Test splitting on whitespace"""
        assert tokenize("The quick brown fox") == ["the", "quick", "brown", "fox"]

    def test_punctuation_is_a_separator(self):
        """Test that punctuation splits tokens and is dropped"""
        assert tokenize("Hello, world! How's it going?") == [
            "hello", "world", "how's", "it", "going"
        ]

    def test_apostrophes_kept_inside_tokens(self):
        """Test contractions and possessives stay one token"""
        tokens = tokenize("Bob's bike isn't here")
        assert "bob's" in tokens
        assert "isn't" in tokens
        assert len(tokens) == 4

    def test_numbers_kept(self):
        """Test that numbers are tokens too (no number filtering)"""
        assert tokenize("Python 3.11 in 2024") == ["python", "3", "11", "in", "2024"]

    def test_hyphen_and_underscore_split(self):
        """Test that hyphens and underscores are separators"""
        assert tokenize("blue-green file_name") == ["blue", "green", "file", "name"]

    def test_unicode_letters(self):
        """Test non-ASCII letters are part of tokens and lowercased"""
        assert tokenize("Café NAÏVE Straße") == ["café", "naïve", "straße"]

    def test_non_latin_scripts(self):
        """Test letters from other scripts"""
        assert tokenize("Привет мир") == ["привет", "мир"]

    @pytest.mark.parametrize("text", ["", "   ", "\n\t", "!!! ... ---"])
    def test_empty_results(self, text):
        """Test that separator-only input yields no tokens"""
        assert tokenize(text) == []

    def test_no_empty_tokens(self):
        """Test leading/trailing/consecutive separators never produce empty tokens"""
        tokens = tokenize("  ,,fox;;  dog..  ")
        assert tokens == ["fox", "dog"]
        assert all(tokens)

    @pytest.mark.parametrize("text", [
        "The Quick, brown FOX -- jumps!!",
        "Bob's bike's wheel",
        "Café au lait, s'il vous plaît",
        "a  b\tc\nd",
    ])
    def test_idempotent_on_rejoined_output(self, text):
        """Test tokenizing the rejoined tokens gives the same tokens"""
        tokens = tokenize(text)
        assert tokenize(" ".join(tokens)) == tokens
