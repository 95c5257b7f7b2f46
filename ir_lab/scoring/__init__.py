"""
Text-to-score pipeline behind the IR visualizers.

Components:
- tokenizer: lowercase Unicode letter/number/apostrophe tokens
- normalizer: toy lemmatizer and soft-delete stop-word filter (tokenization visualizer)
- vocabulary: ordered unique terms, query-only or union scope
- statistics: raw counts, normalized TF, DF, document lengths
- bag_of_words: count vectors, dot product, cosine similarity
- tfidf: TF × smoothed IDF vectors, dot product, cosine similarity
- bm25: Okapi BM25 with k1/b and two IDF variants

Every call recomputes from its inputs; nothing is cached between calls.
"""

from .tokenizer import tokenize
from .normalizer import (
    Token,
    TokenState,
    lemmatize,
    lemmatize_tokens,
    filter_stop_words,
    active_terms,
    surviving_vocabulary,
    normalize_text,
)
from .vocabulary import VocabularyScope, build_vocabulary
from .statistics import (
    FrequencyTable,
    compute_frequency_table,
    raw_count,
    normalized_frequency,
    document_frequency,
)
from .vectors import SimilarityScore, cosine_similarity, dot_product
from .bag_of_words import BagOfWordsResult, score_bag_of_words
from .tfidf import TfIdfResult, score_tfidf
from .bm25 import BM25Scorer, Bm25Result, Bm25Score, IdfMode, score_bm25
from .errors import InvalidParameterError

__all__ = [
    "tokenize",
    "Token",
    "TokenState",
    "lemmatize",
    "lemmatize_tokens",
    "filter_stop_words",
    "active_terms",
    "surviving_vocabulary",
    "normalize_text",
    "VocabularyScope",
    "build_vocabulary",
    "FrequencyTable",
    "compute_frequency_table",
    "raw_count",
    "normalized_frequency",
    "document_frequency",
    "SimilarityScore",
    "cosine_similarity",
    "dot_product",
    "BagOfWordsResult",
    "score_bag_of_words",
    "TfIdfResult",
    "score_tfidf",
    "BM25Scorer",
    "Bm25Result",
    "Bm25Score",
    "IdfMode",
    "score_bm25",
    "InvalidParameterError",
]
