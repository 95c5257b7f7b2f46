"""Unit test fixtures - small corpora used across scorer tests"""

import pytest


@pytest.fixture
def fox_corpus():
    """Query with a stop word that occurs in no document"""
    return {
        "query": "the quick fox",
        "documents": ["a quick brown fox jumps", "lazy dogs sleep all day"],
    }


@pytest.fixture
def cat_corpus():
    """Single-term query, documents differing only in repetition"""
    return {
        "query": "cat",
        "documents": ["cat cat cat", "cat"],
    }


@pytest.fixture
def three_documents():
    """Three documents of different lengths sharing some terms"""
    return {
        "query": "fox runs fast",
        "documents": [
            "The fox runs fast and the fox runs far",
            "A dog runs",
            "Slow turtles walk very slowly through the long grass",
        ],
    }
