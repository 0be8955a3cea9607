# =============================================================================
# Scoring Engine
# =============================================================================
# Combines per-word evidence into a single document score in [0, 1].
#
# How it works:
#   1. Each trained word gets a raw spam probability from how often it
#      showed up in spam vs ham, normalized by the number of documents of
#      each kind.
#   2. That raw value is pulled toward a neutral prior (0.5) in proportion
#      to how little evidence there is for the word (Bayesian smoothing).
#   3. The smoothed probabilities are combined with Fisher's method, once
#      looking for "spammy" extremes and once for "hammy" ones, and the two
#      one-sided results are averaged (Robinson's chi-squared combining).
#
# Words the store knows about but has never trained on carry no signal and
# are left out entirely.
# =============================================================================

import math
from typing import Iterable, Sequence

from bayes_filter.core import WordFeature
from bayes_filter.spam.store import FeatureStore

# Defaults for Bayesian smoothing
DEFAULT_ASSUMED_PROBABILITY = 0.5
DEFAULT_PRIOR_WEIGHT = 1.0


def is_untrained(feature: WordFeature) -> bool:
    """True iff both raw counts are exactly zero."""
    return feature.spam_count == 0 and feature.ham_count == 0


def spam_probability(feature: WordFeature, store: FeatureStore) -> float:
    """
    Raw probability that a document containing this word is spam.

    Counts are turned into frequencies first so that a lopsided training
    set (say ten times more ham than spam) doesn't skew every word.

    Raises:
        InvariantError: If the feature is untrained.
    """
    if is_untrained(feature):
        raise InvariantError(f"No training data for {feature.word!r}")

    spam_freq = feature.spam_count / max(1, store.total_spam_docs)
    ham_freq = feature.ham_count / max(1, store.total_ham_docs)
    return spam_freq / (spam_freq + ham_freq)


def bayesian_spam_probability(
    feature: WordFeature,
    store: FeatureStore,
    assumed_probability: float = DEFAULT_ASSUMED_PROBABILITY,
    weight: float = DEFAULT_PRIOR_WEIGHT,
) -> float:
    """
    Spam probability smoothed toward an assumed prior.

    A word seen once gets about half its weight from the prior; a word
    seen hundreds of times is almost entirely its own data.

    Args:
        feature: A trained word feature.
        store: Store providing the document totals.
        assumed_probability: Probability assumed for a word with no data.
        weight: How many data points the assumption is worth.
    """
    basic = spam_probability(feature, store)
    data_points = feature.spam_count + feature.ham_count
    return (weight * assumed_probability + data_points * basic) / (weight + data_points)


def inverse_chi_square(value: float, degrees_of_freedom: int) -> float:
    """
    Return prob(chisq >= value) with the given (even) degrees of freedom.

    Uses the closed-form series for even degrees of freedom, building each
    term from the previous one instead of computing factorials.

    Raises:
        InvariantError: If degrees_of_freedom is negative or odd.
    """
    if degrees_of_freedom < 0 or degrees_of_freedom % 2 != 0:
        raise InvariantError(
            f"degrees_of_freedom must be a non-negative even integer, "
            f"got {degrees_of_freedom}"
        )

    m = value / 2.0
    term = math.exp(-m)
    total = 0.0
    for i in range(1, degrees_of_freedom // 2 + 1):
        total += term
        term *= m / i

    # Roundoff can push the sum a hair above 1.0 for small values
    return min(total, 1.0)


def fisher(probs: Sequence[float], n: int) -> float:
    """Fisher's combined probability for a list of p-values."""
    return inverse_chi_square(-2.0 * sum(math.log(p) for p in probs), 2 * n)


def score(
    features: Iterable[WordFeature],
    store: FeatureStore,
    assumed_probability: float = DEFAULT_ASSUMED_PROBABILITY,
    weight: float = DEFAULT_PRIOR_WEIGHT,
) -> float:
    """
    Combine word features into a document spamminess score.

    Args:
        features: Features of the document's words (untrained ones ignored).
        store: Store providing the document totals.
        assumed_probability: Prior for Bayesian smoothing.
        weight: Strength of the prior.

    Returns:
        0.0 (certainly ham) to 1.0 (certainly spam). 0.5 when there is no
        usable evidence at all.
    """
    spam_probs: list[float] = []
    ham_probs: list[float] = []

    for feature in features:
        if is_untrained(feature):
            continue
        p = bayesian_spam_probability(feature, store, assumed_probability, weight)
        spam_probs.append(p)
        ham_probs.append(1.0 - p)

    n = len(spam_probs)
    h = 1.0 - fisher(spam_probs, n)
    s = 1.0 - fisher(ham_probs, n)
    return ((1.0 - h) + s) / 2.0


# =============================================================================
# Exceptions
# =============================================================================

class InvariantError(AssertionError):
    """Raised when the engine is called in a way its own code never should."""
    pass
