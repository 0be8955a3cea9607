# =============================================================================
# Word Tokenizer for Spam Classification
# =============================================================================
# Turns raw text into the set of words the classifier reasons about.
#
# Rules:
#   - A word is a maximal run of ASCII letters
#   - Runs shorter than the minimum length (3 by default) are dropped
#   - Everything else (digits, punctuation, whitespace) only separates words
#   - Case is kept as-is, so "Buy" and "buy" are different features
#   - Each word counts once per document, however often it repeats
# =============================================================================

import re

from bayes_filter.config import TokenizerConfig


class Tokenizer:
    """
    Extracts the set of candidate words from a piece of text.

    Usage:
        >>> tokenizer = Tokenizer()
        >>> sorted(tokenizer.extract_words("Buy buy BUY now!!! 2 u"))
        ['BUY', 'Buy', 'buy', 'now']
    """

    def __init__(self, config: TokenizerConfig | None = None) -> None:
        """
        Initialize the tokenizer.

        Args:
            config: Tokenizer configuration.

        Raises:
            ConfigError: If the configuration is unusable.
        """
        self.config = config or TokenizerConfig()
        self.config.validate()

        # [A-Za-z] rather than \w or isalpha(): only ASCII letters are words
        self._word_pattern = re.compile(
            r"[A-Za-z]{%d,}" % self.config.min_word_length
        )

    def extract_words(self, text: str) -> set[str]:
        """
        Extract the unique words of a text.

        Args:
            text: Plain text, already pulled out of whatever message format.

        Returns:
            Set of words. Empty for empty or word-less text.
        """
        if not text:
            return set()

        # findall on a greedy letter class always returns maximal runs
        return set(self._word_pattern.findall(text))


_default_tokenizer = Tokenizer()


def extract_words(text: str) -> set[str]:
    """Extract words using the default tokenizer settings."""
    return _default_tokenizer.extract_words(text)
