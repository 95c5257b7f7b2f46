"""Vector arithmetic shared by the bag-of-words and TF-IDF scorers."""

import math
from dataclasses import dataclass
from typing import List, Sequence


def dot_product(a: Sequence[float], b: Sequence[float]) -> float:
    """Dot product of two equal-length vectors."""
    return sum(ai * bi for ai, bi in zip(a, b))


def vector_magnitude(v: Sequence[float]) -> float:
    """Euclidean norm of a vector."""
    return math.sqrt(sum(vi * vi for vi in v))


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """Cosine similarity. Returns 0.0 when either vector has zero norm."""
    mag_a = vector_magnitude(a)
    mag_b = vector_magnitude(b)
    if mag_a == 0 or mag_b == 0:
        return 0.0
    # Rounding can push parallel vectors a hair past ±1
    return max(-1.0, min(1.0, dot_product(a, b) / (mag_a * mag_b)))


@dataclass
class SimilarityScore:
    """Document vector and its similarity to the query vector"""
    vector: List[float]
    dot: float
    cosine: float


def score_vectors(query_vector: Sequence[float], doc_vector: Sequence[float]) -> SimilarityScore:
    """Dot product and cosine similarity of a document vector against the query."""
    return SimilarityScore(
        vector=list(doc_vector),
        dot=dot_product(query_vector, doc_vector),
        cosine=cosine_similarity(query_vector, doc_vector),
    )
