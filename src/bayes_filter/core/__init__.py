# =============================================================================
# Bayes-Filter Core Module
# =============================================================================
# Core domain models for the filter. These are plain dataclasses and enums
# with no dependencies on the rest of the package, so they can be imported
# anywhere without circular import trouble.
#
#   - Label: What a training document is (ham or spam)
#   - Verdict: What the classifier decided (ham, spam, or unsure)
#   - WordFeature: Accumulated counts for one distinct word
# =============================================================================

from bayes_filter.core.feature import WordFeature
from bayes_filter.core.label import Label, Verdict

__all__ = [
    "Label",
    "Verdict",
    "WordFeature",
]
