"""
Tokenizer shared by every visualizer.

Tokenization pipeline:
1. Lowercase conversion
2. Split on every run of characters that is not a letter, a number or an apostrophe
3. Drop empty strings left by leading/trailing/consecutive separators

Apostrophes stay inside tokens so contractions and possessives
("bob's", "don't") survive as a single term. Letters and numbers are
Unicode-aware: "Café" → "café", "naïve" → "naïve".
"""

import re
from typing import List

# \w covers Unicode letters, numbers and the underscore; the underscore is
# treated as a separator alongside everything else outside [\w'].
_SEPARATOR_PATTERN = re.compile(r"(?:[^\w']|_)+")


def tokenize(text: str) -> List[str]:
    """
    Split raw text into lowercase tokens.

    Args:
        text: Raw input text (query or document)

    Returns:
        List of non-empty lowercase tokens, in text order

    Examples:
        >>> tokenize("The quick brown fox!")
        ['the', 'quick', 'brown', 'fox']

        >>> tokenize("Bob's bike, 2 wheels")
        ["bob's", 'bike', '2', 'wheels']

        >>> tokenize("   ")
        []
    """
    if not text:
        return []

    return [t for t in _SEPARATOR_PATTERN.split(text.lower()) if t]
