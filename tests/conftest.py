# =============================================================================
# Pytest Configuration and Fixtures
# =============================================================================
# Shared fixtures for the Bayes-Filter test suite.
# =============================================================================

import pytest
import tempfile
from pathlib import Path

from bayes_filter import FeatureStore, Label, SpamClassifier


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def store():
    """An empty feature store."""
    return FeatureStore()


@pytest.fixture
def classifier(store):
    """An untrained classifier backed by the `store` fixture."""
    return SpamClassifier(store=store)


@pytest.fixture
def spam_corpus():
    """Spam training texts."""
    return [
        "URGENT!!! You've WON $1,000,000!!! Claim your prize now",
        "Cheap pills online, claim your discount now",
        "Congratulations winner, click here to claim the prize",
        "Limited time offer: cheap watches, act now",
    ]


@pytest.fixture
def ham_corpus():
    """Ham training texts."""
    return [
        "The meeting is moved to Thursday afternoon",
        "Please review the attached quarterly report before the meeting",
        "Lunch on Friday? The usual place works for me",
        "Here are the notes from the design review",
    ]


@pytest.fixture
def trained_classifier(classifier, spam_corpus, ham_corpus):
    """A classifier trained on both sample corpora."""
    for text in spam_corpus:
        classifier.train(text, Label.SPAM)
    for text in ham_corpus:
        classifier.train(text, Label.HAM)
    return classifier
