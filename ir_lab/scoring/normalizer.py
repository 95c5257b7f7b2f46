"""
Lexical normalization for the tokenization visualizer.

Two independent passes over a token list:
- Lemmatization: replace a known surface form with its lemma
  ("running" → "run", "foxes" → "fox"). The dictionary is a small closed
  table, not morphological analysis: unknown words are never touched.
- Stop-word filtering: mark function words as removed. Removed tokens stay
  in the list (the animation layer keeps their position) but drop out of
  vocabulary and statistics.

Both passes are idempotent, and the surviving vocabulary is the same whichever
runs first, because stop words are matched against the current text.
"""

import logging
from dataclasses import dataclass, replace
from enum import Enum
from types import MappingProxyType
from typing import Iterable, List, Mapping, Union

from .tokenizer import tokenize
from .vocabulary import VocabularyScope, build_vocabulary

logger = logging.getLogger(__name__)

# Lemma → known surface forms
LEMMA_FORMS: Mapping[str, frozenset] = MappingProxyType({
    'bob': frozenset(['bob', 'bobs', "bob's", 'bob’s']),
    'run': frozenset(['run', 'runs', 'running', 'ran']),
    'bike': frozenset(['bike', 'bikes', "bike's", 'bike’s']),
    'fox': frozenset(['fox', 'foxes']),
    'dog': frozenset(['dog', 'dogs']),
})

# Surface form → lemma (reverse index, built once)
FORM_TO_LEMMA: Mapping[str, str] = MappingProxyType({
    form: lemma
    for lemma, forms in LEMMA_FORMS.items()
    for form in forms
})

# Articles, conjunctions, auxiliaries, pronouns and prepositions
STOPWORDS = frozenset([
    'the', 'a', 'an', 'and', 'but',
    'is', 'are', 'was', 'were',
    'he', 'she', 'they', 'it', 'his', 'her', 'its',
    'of', 'to', 'in', 'on', 'over', 'by', 'with', 'for', 'as',
])


class TokenState(str, Enum):
    """Whether a token still takes part in vocabulary/statistics"""
    ACTIVE = "active"
    REMOVED = "removed"


@dataclass(frozen=True)
class Token:
    """Single token as seen by the tokenization visualizer"""
    original: str        # Surface text produced by the tokenizer
    text: str            # Current text (lemma once lemmatized)
    removed: bool = False

    @classmethod
    def from_text(cls, text: str) -> "Token":
        return cls(original=text, text=text)

    @property
    def state(self) -> TokenState:
        return TokenState.REMOVED if self.removed else TokenState.ACTIVE

    @property
    def lemmatized(self) -> bool:
        return self.text != self.original


TokenLike = Union[str, Token]


def _as_token(token: TokenLike) -> Token:
    return token if isinstance(token, Token) else Token.from_text(token)


def lemmatize(tokens: Iterable[str]) -> List[str]:
    """
    Map each known surface form to its lemma.

    Examples:
        >>> lemmatize(["the", "foxes", "ran"])
        ['the', 'fox', 'run']
    """
    return [FORM_TO_LEMMA.get(t, t) for t in tokens]


def lemmatize_tokens(tokens: Iterable[TokenLike]) -> List[Token]:
    """Lemmatize token objects in place of strings; removed tokens are skipped."""
    result = []
    for token in map(_as_token, tokens):
        if not token.removed and token.text in FORM_TO_LEMMA:
            token = replace(token, text=FORM_TO_LEMMA[token.text])
        result.append(token)
    return result


def filter_stop_words(tokens: Iterable[TokenLike]) -> List[Token]:
    """
    Soft-delete stop words.

    Tokens whose current text is a stop word come back with removed=True;
    nothing is spliced out, so positions line up with the input.

    Examples:
        >>> [(t.text, t.removed) for t in filter_stop_words(["the", "fox"])]
        [('the', True), ('fox', False)]
    """
    result = []
    for token in map(_as_token, tokens):
        if not token.removed and token.text in STOPWORDS:
            token = replace(token, removed=True)
        result.append(token)
    return result


def active_terms(tokens: Iterable[TokenLike]) -> List[str]:
    """Texts of the tokens still active, in order"""
    return [t.text for t in map(_as_token, tokens) if not t.removed]


def surviving_vocabulary(tokens: Iterable[TokenLike]) -> List[str]:
    """Sorted unique texts of the active tokens (vocabulary readout)"""
    return sorted(build_vocabulary([active_terms(tokens)], VocabularyScope.UNION))


def normalize_text(
    text: str,
    apply_lemmatization: bool = False,
    remove_stop_words: bool = False
) -> List[Token]:
    """
    Run the tokenization visualizer pipeline over raw text.

    Args:
        text: Raw input text
        apply_lemmatization: Apply the lemma dictionary
        remove_stop_words: Soft-delete stop words

    Returns:
        One Token per tokenizer output, in text order
    """
    tokens = [Token.from_text(t) for t in tokenize(text)]

    if apply_lemmatization:
        tokens = lemmatize_tokens(tokens)
    if remove_stop_words:
        tokens = filter_stop_words(tokens)

    logger.debug(
        f"Normalized {len(tokens)} tokens "
        f"(apply_lemmatization={apply_lemmatization}, remove_stop_words={remove_stop_words}, "
        f"removed={sum(t.removed for t in tokens)})"
    )
    return tokens
