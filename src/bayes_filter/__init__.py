# =============================================================================
# Bayes-Filter: A Trainable Statistical Spam Filter
# =============================================================================
#
# Feed it labeled text to build a model, then feed it unlabeled text to get
# back ham / spam / unsure plus a confidence score.
#
# Features:
#   - Word-level ham/spam counting
#   - Bayesian smoothing of per-word probabilities
#   - Fisher (inverse chi-square) combination into one document score
#   - Independent, TOML-configurable thresholds and priors
#   - Thread-safe shared feature store with lossless snapshot/restore
#
# =============================================================================

__version__ = "0.1.0"
__app_name__ = "bayes-filter"

from bayes_filter.config import ClassifierConfig, Config, ConfigError, TokenizerConfig
from bayes_filter.core import Label, Verdict, WordFeature
from bayes_filter.spam import (
    Classification,
    FeatureStore,
    InvalidLabelError,
    InvariantError,
    SpamClassifier,
    Tokenizer,
    extract_words,
)

__all__ = [
    "Classification",
    "ClassifierConfig",
    "Config",
    "ConfigError",
    "FeatureStore",
    "InvalidLabelError",
    "InvariantError",
    "Label",
    "SpamClassifier",
    "Tokenizer",
    "TokenizerConfig",
    "Verdict",
    "WordFeature",
    "extract_words",
    "__version__",
    "__app_name__",
]
