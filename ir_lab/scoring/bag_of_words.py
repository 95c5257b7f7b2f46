"""
Bag-of-words scoring.

Query and documents become raw count vectors over the union vocabulary:

    dot    = Σ q[i] × d[i]
    cosine = dot / (‖q‖ × ‖d‖)      (0 when either norm is 0)
"""

import logging
from dataclasses import dataclass
from typing import List, Sequence

from .statistics import compute_frequency_table, raw_count
from .tokenizer import tokenize
from .vectors import SimilarityScore, score_vectors
from .vocabulary import VocabularyScope, build_vocabulary

logger = logging.getLogger(__name__)


@dataclass
class BagOfWordsResult:
    """Count vectors and similarity scores for one query against N documents"""
    vocabulary: List[str]
    query_vector: List[int]
    documents: List[SimilarityScore]


def count_vector(vocabulary: Sequence[str], tokens: Sequence[str]) -> List[int]:
    """Raw count of each vocabulary term in tokens"""
    return [raw_count(term, tokens) for term in vocabulary]


def score_bag_of_words(query: str, documents: Sequence[str]) -> BagOfWordsResult:
    """
    Score documents against a query with raw term counts.

    Args:
        query: Raw query text
        documents: Raw document texts

    Returns:
        BagOfWordsResult with one SimilarityScore per document, in input order

    Example:
        >>> result = score_bag_of_words("cat", ["cat cat cat", "cat"])
        >>> [(s.dot, s.cosine) for s in result.documents]
        [(3, 1.0), (1, 1.0)]
    """
    query_tokens = tokenize(query)
    doc_tokens = [tokenize(doc) for doc in documents]

    vocabulary = build_vocabulary([query_tokens, *doc_tokens], VocabularyScope.UNION)
    table = compute_frequency_table(vocabulary, doc_tokens)

    query_vector = count_vector(vocabulary, query_tokens)
    scores = [
        score_vectors(query_vector, [table.raw_count(term, i) for term in vocabulary])
        for i in range(len(doc_tokens))
    ]

    logger.debug(
        f"Bag-of-words: {len(vocabulary)} terms, {len(scores)} documents, "
        f"dots={[s.dot for s in scores]}"
    )

    return BagOfWordsResult(
        vocabulary=vocabulary,
        query_vector=query_vector,
        documents=scores,
    )
