# =============================================================================
# Labels and Verdicts
# =============================================================================
# Training only ever knows two classes. Classification adds a third bucket
# for scores that land between the two thresholds.
# =============================================================================

from enum import Enum


class Label(Enum):
    """
    The class a training document belongs to.

    Every place that dispatches on a Label handles both members
    explicitly, so adding a member shows up as a failing branch rather
    than a silent fallthrough.
    """
    HAM = "ham"         # Legitimate mail
    SPAM = "spam"       # Unwanted mail

    @classmethod
    def coerce(cls, value: "Label | str") -> "Label | None":
        """
        Accept either a Label or its (case-insensitive) string value.

        Returns None for anything unrecognized; the caller decides how
        to report it.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                return None
        return None


class Verdict(Enum):
    """Outcome of classifying a document."""
    HAM = "ham"
    SPAM = "spam"
    UNSURE = "unsure"   # Score fell between the ham and spam thresholds
