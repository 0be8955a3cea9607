# =============================================================================
# Word Feature Model
# =============================================================================
# One record per distinct word seen by a FeatureStore. The counts are
# document counts: a word appearing five times in one message still only
# bumps its count by one for that message.
# =============================================================================

from dataclasses import dataclass, field


@dataclass(eq=False)
class WordFeature:
    """
    Observed statistics for a single word.

    Records are identity-compared: the store hands out the same object
    for the same word, and training mutates it in place.

    Attributes:
        word: The word itself. Case-sensitive, required, never changes.
        spam_count: Number of trained spam documents containing the word.
        ham_count: Number of trained ham documents containing the word.

    Example:
        >>> feature = WordFeature("lisp")
        >>> feature.spam_count += 1
        >>> str(feature)
        'lisp, ham=0, spam=1'
    """

    word: str
    spam_count: int = field(default=0)
    ham_count: int = field(default=0)

    def __post_init__(self) -> None:
        if not isinstance(self.word, str) or not self.word:
            raise ValueError(f"WordFeature needs a non-empty word, got {self.word!r}")
        if self.spam_count < 0 or self.ham_count < 0:
            raise ValueError(f"Negative counts for {self.word!r}")

    def __setattr__(self, name: str, value: object) -> None:
        # The word is the store key; changing it would orphan the record
        if name == "word" and "word" in self.__dict__:
            raise AttributeError("WordFeature.word is read-only")
        super().__setattr__(name, value)

    @property
    def is_untrained(self) -> bool:
        """True if no trained document has contained this word."""
        return self.spam_count == 0 and self.ham_count == 0

    def __str__(self) -> str:
        return f"{self.word}, ham={self.ham_count}, spam={self.spam_count}"
