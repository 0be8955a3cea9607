# =============================================================================
# Configuration Management
# =============================================================================
# Handles loading, saving, and validating filter configuration.
#
# All tunables live in one TOML file:
#   $XDG_CONFIG_HOME/bayes-filter/config.toml  (default: ~/.config/bayes-filter/)
#
#   [classifier]
#   max_ham_score = 0.4         # Scores <= this are ham
#   min_spam_score = 0.6        # Scores >= this are spam
#   assumed_probability = 0.5   # Prior for words with little evidence
#   prior_weight = 1.0          # How many data points the prior is worth
#
#   [tokenizer]
#   min_word_length = 3
#
# A missing file means defaults. Missing keys take their defaults too.
# =============================================================================

import os
import tomllib  # Built into Python 3.11+
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import tomli_w  # For writing TOML (tomllib is read-only)


# Application identifier used in the XDG path
APP_NAME = "bayes-filter"


def get_xdg_config_home() -> Path:
    """
    Returns the XDG config directory for the filter.

    Respects $XDG_CONFIG_HOME if set, otherwise uses ~/.config/bayes-filter/
    """
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        base = Path(xdg_config)
    else:
        base = Path.home() / ".config"
    return base / APP_NAME


# =============================================================================
# Configuration Data Structures
# =============================================================================

@dataclass
class ClassifierConfig:
    """
    Configuration for scoring and classification.

    Attributes:
        max_ham_score: Highest score still classified as ham (inclusive).
        min_spam_score: Lowest score classified as spam (inclusive).
                        Scores strictly between the two are "unsure".
        assumed_probability: Spam probability assumed for a word with no
                             evidence. Must be strictly between 0 and 1.
        prior_weight: Weight of that assumption, in data points. Must be > 0.
    """
    max_ham_score: float = 0.4
    min_spam_score: float = 0.6
    assumed_probability: float = 0.5
    prior_weight: float = 1.0

    def validate(self) -> None:
        """
        Check that the thresholds and prior are usable.

        Raises:
            ConfigError: Describing the first bad setting found.
        """
        for name in ("max_ham_score", "min_spam_score"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ConfigError(f"{name} must be between 0 and 1, got {value}")
        if self.max_ham_score > self.min_spam_score:
            raise ConfigError(
                f"max_ham_score ({self.max_ham_score}) is above "
                f"min_spam_score ({self.min_spam_score})"
            )
        # Exactly 0 or 1 would make log(p) blow up during scoring
        if not 0.0 < self.assumed_probability < 1.0:
            raise ConfigError(
                f"assumed_probability must be strictly between 0 and 1, "
                f"got {self.assumed_probability}"
            )
        if not self.prior_weight > 0:
            raise ConfigError(f"prior_weight must be positive, got {self.prior_weight}")


@dataclass
class TokenizerConfig:
    """
    Configuration for word extraction.

    Attributes:
        min_word_length: Shortest letter run that counts as a word.
    """
    min_word_length: int = 3

    def validate(self) -> None:
        """Raises ConfigError if the minimum word length is below 1."""
        if self.min_word_length < 1:
            raise ConfigError(
                f"min_word_length must be at least 1, got {self.min_word_length}"
            )


@dataclass
class Config:
    """
    Main configuration container.

    Attributes:
        classifier: Thresholds and smoothing parameters.
        tokenizer: Word extraction settings.

    Usage:
        >>> config = Config.load()
        >>> config.classifier.min_spam_score
        0.6
    """
    classifier: ClassifierConfig = field(default_factory=ClassifierConfig)
    tokenizer: TokenizerConfig = field(default_factory=TokenizerConfig)

    @staticmethod
    def config_file_path() -> Path:
        """Returns the path to the config file."""
        return get_xdg_config_home() / "config.toml"

    # -------------------------------------------------------------------------
    # Loading and Saving
    # -------------------------------------------------------------------------

    @classmethod
    def load(cls, path: Path | None = None) -> "Config":
        """
        Load configuration from a TOML file.

        Args:
            path: File to read. Uses the XDG location if None.

        Returns:
            Loaded and validated Config. Defaults if the file doesn't exist.

        Raises:
            ConfigError: If the file exists but is invalid.
        """
        config_path = path or cls.config_file_path()

        if not config_path.exists():
            return cls()

        try:
            with open(config_path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid config file: {e}") from e

        config = cls._from_dict(data)
        config.validate()
        return config

    def save(self, path: Path | None = None) -> None:
        """
        Save configuration to a TOML file.

        Creates the parent directory if it doesn't exist.
        """
        config_path = path or self.config_file_path()
        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "wb") as f:
            tomli_w.dump(self._to_dict(), f)

    def validate(self) -> None:
        """
        Check that every setting is usable.

        Raises:
            ConfigError: Describing the first bad setting found.
        """
        self.classifier.validate()
        self.tokenizer.validate()

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> "Config":
        """Create a Config from parsed TOML."""
        defaults = ClassifierConfig()
        classifier = data.get("classifier", {})
        tokenizer = data.get("tokenizer", {})

        try:
            return cls(
                classifier=ClassifierConfig(
                    max_ham_score=_number(classifier, "max_ham_score", defaults.max_ham_score),
                    min_spam_score=_number(classifier, "min_spam_score", defaults.min_spam_score),
                    assumed_probability=_number(
                        classifier, "assumed_probability", defaults.assumed_probability
                    ),
                    prior_weight=_number(classifier, "prior_weight", defaults.prior_weight),
                ),
                tokenizer=TokenizerConfig(
                    min_word_length=_integer(tokenizer, "min_word_length", 3),
                ),
            )
        except AttributeError as e:
            # A section that isn't a table, e.g. `classifier = 1`
            raise ConfigError(f"Invalid config section: {e}") from e

    def _to_dict(self) -> dict[str, Any]:
        """Convert Config to a dictionary for TOML serialization."""
        return {
            "classifier": {
                "max_ham_score": self.classifier.max_ham_score,
                "min_spam_score": self.classifier.min_spam_score,
                "assumed_probability": self.classifier.assumed_probability,
                "prior_weight": self.classifier.prior_weight,
            },
            "tokenizer": {
                "min_word_length": self.tokenizer.min_word_length,
            },
        }


def _number(section: dict[str, Any], key: str, default: float) -> float:
    value = section.get(key, default)
    # bool is an int subclass; `max_ham_score = true` is a mistake, not 1.0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError(f"{key} must be a number, got {value!r}")
    return float(value)


def _integer(section: dict[str, Any], key: str, default: int) -> int:
    value = section.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"{key} must be an integer, got {value!r}")
    return value


# =============================================================================
# Exceptions
# =============================================================================

class ConfigError(Exception):
    """Raised when there's an error loading or parsing configuration."""
    pass
