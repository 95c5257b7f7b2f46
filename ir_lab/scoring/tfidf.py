"""
TF-IDF scoring.

Formula:
    tf(t, x)     = count(t, x) / |x|            (0 for empty text)
    idf(t)       = ln((N + 1) / (df(t) + 1))
    w(t, x)      = tf(t, x) × idf(t)

Where:
    N     = number of documents (the query is not counted)
    df(t) = number of documents containing t

The +1 smoothing keeps idf ≥ 0 for every df in [0, N] and defined for terms
that only occur in the query. Weights are computed over the union vocabulary
for the query and each document; similarity is dot product and cosine over
the weighted vectors.
"""

import logging
import math
from dataclasses import dataclass
from typing import List, Sequence

from .statistics import compute_frequency_table, normalized_frequency
from .tokenizer import tokenize
from .vectors import SimilarityScore, score_vectors
from .vocabulary import VocabularyScope, build_vocabulary

logger = logging.getLogger(__name__)


def tfidf_idf(df: int, n: int) -> float:
    """Smoothed IDF: ln((N + 1) / (df + 1))"""
    return math.log((n + 1) / (df + 1))


@dataclass
class TfIdfResult:
    """Weighted vectors and similarity scores for one query against N documents"""
    vocabulary: List[str]
    idf: List[float]
    query_vector: List[float]
    documents: List[SimilarityScore]


def score_tfidf(query: str, documents: Sequence[str]) -> TfIdfResult:
    """
    Score documents against a query with TF-IDF weighted vectors.

    Args:
        query: Raw query text
        documents: Raw document texts

    Returns:
        TfIdfResult; idf and every vector are aligned with vocabulary
    """
    query_tokens = tokenize(query)
    doc_tokens = [tokenize(doc) for doc in documents]

    vocabulary = build_vocabulary([query_tokens, *doc_tokens], VocabularyScope.UNION)
    table = compute_frequency_table(vocabulary, doc_tokens)

    idf = [tfidf_idf(table.df[term], table.n) for term in vocabulary]

    query_vector = [
        normalized_frequency(term, query_tokens) * idf_t
        for term, idf_t in zip(vocabulary, idf)
    ]
    scores = []
    for i in range(table.n):
        doc_vector = [
            table.normalized_frequency(term, i) * idf_t
            for term, idf_t in zip(vocabulary, idf)
        ]
        scores.append(score_vectors(query_vector, doc_vector))

    logger.debug(
        f"TF-IDF: {len(vocabulary)} terms, {len(scores)} documents, "
        f"cosines={[round(s.cosine, 4) for s in scores]}"
    )

    return TfIdfResult(
        vocabulary=vocabulary,
        idf=idf,
        query_vector=query_vector,
        documents=scores,
    )
