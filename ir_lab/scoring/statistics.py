"""
Frequency statistics for scoring.

Raw statistics over tokenized documents:
    raw_count(t, d)            = occurrences of t in d
    normalized_frequency(t, d) = raw_count(t, d) / |d|   (0 for an empty d)
    df(t)                      = number of documents containing t at least once
    avgdl                      = mean document length over the document set

Bag-of-words and BM25 consume raw counts; TF-IDF consumes the normalized form.
"""

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Sequence

logger = logging.getLogger(__name__)


def raw_count(term: str, tokens: Sequence[str]) -> int:
    """Occurrences of term in a token sequence"""
    return sum(1 for t in tokens if t == term)


def normalized_frequency(term: str, tokens: Sequence[str]) -> float:
    """Occurrences of term divided by sequence length; 0.0 for an empty sequence"""
    if not tokens:
        return 0.0
    return raw_count(term, tokens) / len(tokens)


def document_frequency(term: str, documents: Sequence[Sequence[str]]) -> int:
    """Number of documents that contain term at least once"""
    return sum(1 for doc in documents if term in doc)


@dataclass
class FrequencyTable:
    """
    Per-term statistics over a document set.

    tf[term][i] is the raw count of term in document i.
    """
    vocabulary: List[str]
    tf: Dict[str, List[int]] = field(default_factory=dict)
    df: Dict[str, int] = field(default_factory=dict)
    doc_lengths: List[int] = field(default_factory=list)
    avg_doc_length: float = 0.0

    @property
    def n(self) -> int:
        """Collection size N"""
        return len(self.doc_lengths)

    def raw_count(self, term: str, doc_index: int) -> int:
        counts = self.tf.get(term)
        return counts[doc_index] if counts else 0

    def normalized_frequency(self, term: str, doc_index: int) -> float:
        length = self.doc_lengths[doc_index]
        if length == 0:
            return 0.0
        return self.raw_count(term, doc_index) / length


def compute_frequency_table(
    vocabulary: Sequence[str],
    documents: Sequence[Sequence[str]]
) -> FrequencyTable:
    """
    Build TF/DF/length statistics for every vocabulary term.

    Args:
        vocabulary: Terms to collect statistics for
        documents: Tokenized documents (the query is not a document)

    Returns:
        FrequencyTable with tf, df, per-document lengths and average length

    Example:
        >>> table = compute_frequency_table(["cat"], [["cat", "cat"], ["dog"]])
        >>> table.tf, table.df, table.doc_lengths, table.avg_doc_length
        ({'cat': [2, 0]}, {'cat': 1}, [2, 1], 1.5)
    """
    counters = [Counter(doc) for doc in documents]
    doc_lengths = [len(doc) for doc in documents]

    tf = {}
    df = {}
    for term in vocabulary:
        counts = [counter.get(term, 0) for counter in counters]
        tf[term] = counts
        df[term] = sum(1 for c in counts if c > 0)

    avg_doc_length = sum(doc_lengths) / len(doc_lengths) if doc_lengths else 0.0

    logger.debug(
        f"Computed frequency table: {len(tf)} terms over {len(doc_lengths)} documents "
        f"(avgdl={avg_doc_length:.3f})"
    )

    return FrequencyTable(
        vocabulary=list(vocabulary),
        tf=tf,
        df=df,
        doc_lengths=doc_lengths,
        avg_doc_length=avg_doc_length,
    )
