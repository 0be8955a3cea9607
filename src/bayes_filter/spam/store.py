# =============================================================================
# Feature Store
# =============================================================================
# The classifier's whole model: one WordFeature per distinct word, plus the
# number of ham and spam documents trained so far.
#
# The store is shared mutable state. Training and scoring both go through
# it and never keep private copies of its records: the WordFeature you get
# back from intern() is the same object a later training call bumps.
#
# Thread safety:
#   A single re-entrant lock guards the mapping and the totals. intern() is
#   an atomic get-or-create, and callers that need several steps to appear
#   as one (a full training call, a full scoring pass) hold the lock via
#   `with store.lock:` for the duration.
#
# Persistence is not done here. snapshot()/restore() give a collaborator
# everything needed to save and reload the model losslessly.
# =============================================================================

import logging
import threading
from typing import Any, Iterator

from bayes_filter.core import Label, WordFeature

logger = logging.getLogger(__name__)


class FeatureStore:
    """
    Registry of word features and trained-document totals.

    Usage:
        >>> store = FeatureStore()
        >>> feature = store.intern("lisp")
        >>> feature is store.intern("lisp")
        True
        >>> store.clear()
        >>> len(store)
        0
    """

    def __init__(self) -> None:
        self._features: dict[str, WordFeature] = {}
        self._spam_docs = 0
        self._ham_docs = 0

        # Re-entrant so a trainer holding it can still call intern()
        self.lock = threading.RLock()

    # -------------------------------------------------------------------------
    # Totals
    # -------------------------------------------------------------------------

    @property
    def total_spam_docs(self) -> int:
        """Number of spam training calls made against this store."""
        with self.lock:
            return self._spam_docs

    @property
    def total_ham_docs(self) -> int:
        """Number of ham training calls made against this store."""
        with self.lock:
            return self._ham_docs

    def total_docs(self, label: Label) -> int:
        """Return the trained-document total for one label."""
        if label is Label.SPAM:
            return self.total_spam_docs
        if label is Label.HAM:
            return self.total_ham_docs
        raise ValueError(f"Unknown label: {label!r}")

    def count_document(self, label: Label) -> None:
        """Record that one more document with this label was trained."""
        with self.lock:
            if label is Label.SPAM:
                self._spam_docs += 1
            elif label is Label.HAM:
                self._ham_docs += 1
            else:
                raise ValueError(f"Unknown label: {label!r}")

    # -------------------------------------------------------------------------
    # Features
    # -------------------------------------------------------------------------

    def intern(self, word: str) -> WordFeature:
        """
        Get the feature for a word, creating a zero-count one if needed.

        Args:
            word: Exact, case-sensitive word.

        Returns:
            The single WordFeature this store holds for the word.
        """
        with self.lock:
            feature = self._features.get(word)
            if feature is None:
                feature = WordFeature(word)
                self._features[word] = feature
            return feature

    def get(self, word: str) -> WordFeature | None:
        """Look a word up without creating a record for it."""
        with self.lock:
            return self._features.get(word)

    def clear(self) -> None:
        """Forget every feature and reset both totals to zero."""
        with self.lock:
            self._features.clear()
            self._spam_docs = 0
            self._ham_docs = 0
        logger.info("Feature store cleared")

    def __len__(self) -> int:
        with self.lock:
            return len(self._features)

    def __contains__(self, word: object) -> bool:
        with self.lock:
            return word in self._features

    def __iter__(self) -> Iterator[WordFeature]:
        # Copy under the lock so concurrent interning can't break iteration
        with self.lock:
            features = list(self._features.values())
        return iter(features)

    # -------------------------------------------------------------------------
    # Export / Import
    # -------------------------------------------------------------------------

    def snapshot(self) -> dict[str, Any]:
        """
        Export the full state as plain data.

        Untrained (all-zero) records are left out; they carry no
        information and are recreated on demand by intern().

        Returns:
            {"spam_docs": int, "ham_docs": int,
             "words": {word: {"spam": int, "ham": int}}}
        """
        with self.lock:
            return {
                "spam_docs": self._spam_docs,
                "ham_docs": self._ham_docs,
                "words": {
                    word: {"spam": feature.spam_count, "ham": feature.ham_count}
                    for word, feature in self._features.items()
                    if not feature.is_untrained
                },
            }

    def restore(self, data: dict[str, Any]) -> None:
        """
        Replace the whole state with a snapshot.

        The snapshot is validated first; on error the store is untouched.

        Raises:
            ValueError: If the snapshot is malformed or inconsistent.
        """
        try:
            spam_docs = _count(data["spam_docs"], "spam_docs")
            ham_docs = _count(data["ham_docs"], "ham_docs")
            features = {
                word: WordFeature(
                    word,
                    spam_count=_count(counts["spam"], f"spam count of {word!r}"),
                    ham_count=_count(counts["ham"], f"ham count of {word!r}"),
                )
                for word, counts in data["words"].items()
            }
        except (KeyError, TypeError, AttributeError) as e:
            raise ValueError(f"Malformed feature store snapshot: {e}") from e

        if spam_docs < 0 or ham_docs < 0:
            raise ValueError("Document totals cannot be negative")

        # A word can't appear in more documents than were trained
        for feature in features.values():
            if feature.spam_count > spam_docs or feature.ham_count > ham_docs:
                raise ValueError(
                    f"Counts for {feature.word!r} exceed the document totals"
                )

        with self.lock:
            self._features = features
            self._spam_docs = spam_docs
            self._ham_docs = ham_docs

        logger.info(
            f"Restored feature store: {len(features)} words, "
            f"{spam_docs} spam / {ham_docs} ham documents"
        )


def _count(value: Any, what: str) -> int:
    # bool is an int subclass, and floats or strings would be truncated or coerced
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{what} must be an integer, got {value!r}")
    return value
