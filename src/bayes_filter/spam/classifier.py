# =============================================================================
# Fisher-Combining Spam Classifier
# =============================================================================
# Ties the tokenizer, feature store and scoring engine together.
#
# Training:
#   1. Tokenize the text into its set of unique words
#   2. Bump each word's count for the label by one
#   3. Bump the store's document total for the label by one
#
# Classification:
#   1. Tokenize and intern every word (unseen words get zero-count records,
#      which scoring then ignores)
#   2. Score the features (see scoring.py)
#   3. Bucket the score: <= max_ham_score is ham, >= min_spam_score is spam,
#      anything in between is unsure
# =============================================================================

import logging
from dataclasses import dataclass
from typing import Iterable

from bayes_filter.config import ClassifierConfig, Config
from bayes_filter.core import Label, Verdict, WordFeature
from bayes_filter.spam import scoring
from bayes_filter.spam.store import FeatureStore
from bayes_filter.spam.tokenizer import Tokenizer

logger = logging.getLogger(__name__)


@dataclass
class ClassifierStats:
    """
    Statistics about the classifier.

    Attributes:
        spam_count: Number of spam messages trained on.
        ham_count: Number of ham (non-spam) messages trained on.
        token_count: Number of distinct words the store knows about.
    """
    spam_count: int = 0
    ham_count: int = 0
    token_count: int = 0


@dataclass(frozen=True)
class Classification:
    """
    Result of classifying a text.

    Attributes:
        verdict: Ham, spam, or unsure.
        score: Spamminess from 0.0 (ham) to 1.0 (spam).
    """
    verdict: Verdict
    score: float


class SpamClassifier:
    """
    Trainable ham/spam classifier.

    Usage:
        >>> classifier = SpamClassifier()
        >>> classifier.train("buy cheap pills now", Label.SPAM)
        >>> classifier.train("lunch meeting moved to noon", Label.HAM)
        >>> result = classifier.classify("cheap pills")
        >>> result.verdict
        <Verdict.SPAM: 'spam'>

    Attributes:
        store: The feature store this classifier trains and scores against.
        config: Thresholds and smoothing parameters. Changes take effect on
                the next call and are validated there.
        tokenizer: Tokenizer for extracting words from text.
    """

    def __init__(
        self,
        store: FeatureStore | None = None,
        config: ClassifierConfig | None = None,
        tokenizer: Tokenizer | None = None,
    ) -> None:
        """
        Initialize the classifier.

        Args:
            store: Feature store to use. Creates an empty one if None.
                   Several classifiers may share a store.
            config: Classifier settings. Defaults if None.
            tokenizer: Tokenizer instance. Creates default if None.

        Raises:
            ConfigError: If the classifier settings are unusable.
        """
        self.store = store if store is not None else FeatureStore()
        self.config = config or ClassifierConfig()
        self.tokenizer = tokenizer or Tokenizer()
        self.config.validate()

    @classmethod
    def from_config(cls, config: Config, store: FeatureStore | None = None) -> "SpamClassifier":
        """Build a classifier from a loaded Config."""
        return cls(
            store=store,
            config=config.classifier,
            tokenizer=Tokenizer(config.tokenizer),
        )

    @property
    def stats(self) -> ClassifierStats:
        """Get classifier statistics."""
        return ClassifierStats(
            spam_count=self.store.total_spam_docs,
            ham_count=self.store.total_ham_docs,
            token_count=len(self.store),
        )

    # -------------------------------------------------------------------------
    # Training
    # -------------------------------------------------------------------------

    def train(self, text: str, label: Label | str) -> None:
        """
        Learn from one labeled document.

        Either every word and the document total are updated, or (on an
        invalid label) nothing is.

        Args:
            text: Plain text of the document.
            label: Label.HAM or Label.SPAM (or "ham"/"spam").

        Raises:
            InvalidLabelError: If label isn't ham or spam.
        """
        resolved = Label.coerce(label)
        if resolved is None:
            raise InvalidLabelError(f"Invalid label: {label!r}")

        if resolved is Label.SPAM:
            counter = "spam_count"
        elif resolved is Label.HAM:
            counter = "ham_count"
        else:
            raise InvalidLabelError(f"No counter for label: {resolved!r}")

        words = self.tokenizer.extract_words(text)

        with self.store.lock:
            for word in words:
                feature = self.store.intern(word)
                setattr(feature, counter, getattr(feature, counter) + 1)
            self.store.count_document(resolved)

        logger.debug(f"Trained {resolved.value} document with {len(words)} words")

    def train_many(self, documents: Iterable[tuple[str, Label | str]]) -> int:
        """
        Train on a sequence of (text, label) pairs.

        Each pair is trained on its own; a bad label stops the run but
        leaves earlier pairs trained.

        Returns:
            Number of documents trained.
        """
        trained = 0
        for text, label in documents:
            self.train(text, label)
            trained += 1
        return trained

    # -------------------------------------------------------------------------
    # Classification
    # -------------------------------------------------------------------------

    def features_of(self, text: str) -> list[WordFeature]:
        """Tokenize a text and intern every word it contains."""
        return [self.store.intern(word) for word in self.tokenizer.extract_words(text)]

    def score(self, text: str) -> float:
        """
        Spamminess score of a text, 0.0 (ham) to 1.0 (spam).

        Raises:
            ConfigError: If the classifier settings are unusable.
        """
        self.config.validate()
        with self.store.lock:
            return scoring.score(
                self.features_of(text),
                self.store,
                assumed_probability=self.config.assumed_probability,
                weight=self.config.prior_weight,
            )

    def classification(self, score: float) -> Verdict:
        """
        Bucket a score. Both boundaries are inclusive toward ham/spam.
        """
        if score <= self.config.max_ham_score:
            return Verdict.HAM
        if score >= self.config.min_spam_score:
            return Verdict.SPAM
        return Verdict.UNSURE

    def classify(self, text: str) -> Classification:
        """
        Classify a text.

        Args:
            text: Plain text to classify.

        Returns:
            The verdict together with the underlying score.
        """
        score = self.score(text)
        verdict = self.classification(score)
        logger.debug(f"Classified text as {verdict.value} (score={score:.4f})")
        return Classification(verdict=verdict, score=score)

    def clues(self, text: str) -> list[tuple[str, float]]:
        """
        Per-word evidence behind a text's score.

        Only trained words are listed. Strongest evidence (furthest from
        0.5 in either direction) comes first.

        Returns:
            List of (word, smoothed spam probability).
        """
        self.config.validate()
        with self.store.lock:
            clues = [
                (
                    feature.word,
                    scoring.bayesian_spam_probability(
                        feature,
                        self.store,
                        self.config.assumed_probability,
                        self.config.prior_weight,
                    ),
                )
                for feature in self.features_of(text)
                if not scoring.is_untrained(feature)
            ]
        clues.sort(key=lambda clue: (-abs(clue[1] - 0.5), clue[0]))
        return clues

    def clear_database(self) -> None:
        """Reset the classifier to untrained state."""
        self.store.clear()


# =============================================================================
# Exceptions
# =============================================================================

class InvalidLabelError(ValueError):
    """Raised when training is asked to use a label other than ham or spam."""
    pass
