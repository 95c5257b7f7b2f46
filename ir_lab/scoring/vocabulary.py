"""
Vocabulary construction over token sequences.

Scope policies:
- QUERY_ONLY: terms of the query (first sequence) only. BM25 scores query terms.
- UNION: terms of the query and of every document. Bag-of-words and TF-IDF
  need the full shared axis to draw their vectors.

Order is first occurrence across the sequences, so repeated runs over the
same text produce the same vocabulary.
"""

from enum import Enum
from typing import Iterable, List, Sequence


class VocabularyScope(str, Enum):
    """Which token sequences contribute terms to the vocabulary"""
    QUERY_ONLY = "query-only"
    UNION = "union"


def build_vocabulary(
    sequences: Sequence[Iterable[str]],
    scope: VocabularyScope = VocabularyScope.UNION
) -> List[str]:
    """
    Collect unique terms in first-occurrence order.

    Args:
        sequences: Token sequences, query first, then documents
        scope: VocabularyScope (or its string value)

    Returns:
        Ordered list of unique terms

    Examples:
        >>> build_vocabulary([["cat", "dog"], ["dog", "fish"]], VocabularyScope.UNION)
        ['cat', 'dog', 'fish']

        >>> build_vocabulary([["cat", "dog"], ["dog", "fish"]], "query-only")
        ['cat', 'dog']
    """
    scope = VocabularyScope(scope)

    if not sequences:
        return []

    in_scope = sequences[:1] if scope is VocabularyScope.QUERY_ONLY else sequences

    # dict preserves insertion order
    seen = {}
    for tokens in in_scope:
        for term in tokens:
            seen.setdefault(term, None)

    return list(seen)
