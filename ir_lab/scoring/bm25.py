"""
Okapi BM25 scorer.

BM25 (Best Match 25) ranks documents by the query terms they contain,
with term frequency saturation (k1) and document length normalization (b).

Formula:
    score(t, d) = idf(t) × (f × (k1 + 1)) / (f + k1 × (1 - b + b × dl/avgdl))
    score(d)    = Σ score(t, d) over the unique query terms

Where:
    f     = occurrences of t in d (raw count)
    k1    = term frequency saturation (typically 0-3)
    b     = length normalization strength (typically 0-1)
    dl    = document length (tokens)
    avgdl = average document length over the document set

IDF variants (IdfMode):
    smoothed  (default): ln((N + 0.5) / (df + 0.5))                  always ≥ 0
    robertson:           ln((N - df + 0.5) / (df + 0.5 + 1e-10))    negative when df > N/2

Only query terms are scored. A term absent from a document contributes
exactly 0 without evaluating the formula, so a negative idf never yields -0.0.
k1 and b are not range-checked: any finite value is accepted.
"""

import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Sequence, Union

from .errors import InvalidParameterError, coerce_parameter
from .statistics import compute_frequency_table
from .tokenizer import tokenize
from .vocabulary import VocabularyScope, build_vocabulary

logger = logging.getLogger(__name__)

DEFAULT_K1 = 1.5
DEFAULT_B = 0.75

# Keeps the robertson denominator away from zero
ROBERTSON_EPSILON = 1e-10


class IdfMode(str, Enum):
    """BM25 IDF variant"""
    SMOOTHED = "smoothed"
    ROBERTSON = "robertson"

    @classmethod
    def parse(cls, value: Union[str, "IdfMode"]) -> "IdfMode":
        """Parse an IdfMode from its name; unknown names are an InvalidParameterError"""
        try:
            return cls(value.lower() if isinstance(value, str) else value)
        except ValueError as e:
            raise InvalidParameterError(
                "idf_mode", value, f"expected one of {[m.value for m in cls]}"
            ) from e


def bm25_idf(df: int, n: int, mode: IdfMode = IdfMode.SMOOTHED) -> float:
    """IDF of a term with document frequency df in a collection of n documents."""
    if mode is IdfMode.ROBERTSON:
        return math.log((n - df + 0.5) / (df + 0.5 + ROBERTSON_EPSILON))
    return math.log((n + 0.5) / (df + 0.5))


def term_contribution(
    idf: float,
    tf: int,
    doc_length: int,
    avg_doc_length: float,
    k1: float,
    b: float
) -> float:
    """
    BM25 contribution of one term to one document.

    Returns 0.0 when the term does not occur (tf == 0) and when out-of-range
    k1/b drive the denominator to zero.
    """
    if tf == 0:
        return 0.0

    length_ratio = doc_length / avg_doc_length if avg_doc_length > 0 else 0.0
    numerator = tf * (k1 + 1)
    denominator = tf + k1 * (1 - b + b * length_ratio)

    if denominator == 0:
        return 0.0

    return idf * (numerator / denominator)


@dataclass
class Bm25Score:
    """BM25 total for one document plus the contribution of each query term"""
    total: float
    per_term: Dict[str, float] = field(default_factory=dict)


@dataclass
class Bm25Result:
    """BM25 scores for one query against N documents"""
    vocabulary: List[str]
    idf: Dict[str, float]
    k1: float
    b: float
    idf_mode: IdfMode
    avg_doc_length: float
    documents: List[Bm25Score]


class BM25Scorer:
    """
    Okapi BM25 over a small in-memory document set.

    Statistics (df, N, avgdl) are recomputed from the documents passed to
    each score() call; the scorer only holds its parameters.
    """

    def __init__(
        self,
        k1: Any = DEFAULT_K1,
        b: Any = DEFAULT_B,
        idf_mode: Union[str, IdfMode] = IdfMode.SMOOTHED
    ):
        """
        Initialize BM25 scorer.

        Args:
            k1: Term frequency saturation parameter
                Higher = more weight to repeated terms
                0 = presence only (each matching term scores its idf)
                Typical range: 0 - 3

            b: Length normalization parameter
                Higher = more penalty for long documents
                Typical range: 0.0 - 1.0

            idf_mode: IdfMode or its name ("smoothed", "robertson")

        Raises:
            InvalidParameterError: k1 or b is not a finite number, or
                idf_mode is unknown
        """
        self.k1 = coerce_parameter("k1", k1)
        self.b = coerce_parameter("b", b)
        self.idf_mode = IdfMode.parse(idf_mode)

    def score(self, query: str, documents: Sequence[str]) -> Bm25Result:
        """
        Compute BM25 scores for every document.

        Args:
            query: Raw query text
            documents: Raw document texts

        Returns:
            Bm25Result with one Bm25Score per document, in input order

        Example:
            >>> result = BM25Scorer(k1=1.5, b=0.75).score(
            ...     "the quick fox",
            ...     ["a quick brown fox jumps", "lazy dogs sleep all day"]
            ... )
            >>> result.documents[0].total > result.documents[1].total
            True
        """
        query_tokens = tokenize(query)
        doc_tokens = [tokenize(doc) for doc in documents]

        vocabulary = build_vocabulary([query_tokens, *doc_tokens], VocabularyScope.QUERY_ONLY)
        table = compute_frequency_table(vocabulary, doc_tokens)

        idf = {term: bm25_idf(table.df[term], table.n, self.idf_mode) for term in vocabulary}

        scores = []
        for i, doc_length in enumerate(table.doc_lengths):
            per_term = {
                term: term_contribution(
                    idf=idf[term],
                    tf=table.raw_count(term, i),
                    doc_length=doc_length,
                    avg_doc_length=table.avg_doc_length,
                    k1=self.k1,
                    b=self.b,
                )
                for term in vocabulary
            }
            scores.append(Bm25Score(total=sum(per_term.values(), 0.0), per_term=per_term))

        logger.debug(
            f"BM25 (k1={self.k1}, b={self.b}, idf={self.idf_mode.value}): "
            f"{len(vocabulary)} query terms, {len(scores)} documents, "
            f"totals={[round(s.total, 4) for s in scores]}"
        )

        return Bm25Result(
            vocabulary=vocabulary,
            idf=idf,
            k1=self.k1,
            b=self.b,
            idf_mode=self.idf_mode,
            avg_doc_length=table.avg_doc_length,
            documents=scores,
        )


def score_bm25(
    query: str,
    documents: Sequence[str],
    k1: Any = DEFAULT_K1,
    b: Any = DEFAULT_B,
    idf_mode: Union[str, IdfMode] = IdfMode.SMOOTHED
) -> Bm25Result:
    """Score documents with a one-off BM25Scorer (parameters validated first)."""
    return BM25Scorer(k1=k1, b=b, idf_mode=idf_mode).score(query, documents)
