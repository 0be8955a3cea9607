# =============================================================================
# Spam Module
# =============================================================================
# The statistical engine: tokenizer, feature store, Fisher-combining scorer
# and the classifier that ties them together.
#
# The classifier is trained by counting, nothing more. Each word's spam
# likelihood is smoothed toward a neutral prior and the likelihoods of all
# words in a message are combined with Fisher's inverse chi-square method.
# =============================================================================

from bayes_filter.spam.classifier import (
    Classification,
    ClassifierStats,
    InvalidLabelError,
    SpamClassifier,
)
from bayes_filter.spam.scoring import InvariantError
from bayes_filter.spam.store import FeatureStore
from bayes_filter.spam.tokenizer import Tokenizer, extract_words

__all__ = [
    "Classification",
    "ClassifierStats",
    "FeatureStore",
    "InvalidLabelError",
    "InvariantError",
    "SpamClassifier",
    "Tokenizer",
    "extract_words",
]
