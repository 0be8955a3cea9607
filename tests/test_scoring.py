"""Tests for the probability and Fisher combination functions."""

import math

import pytest

from bayes_filter import InvariantError, Label, WordFeature
from bayes_filter.spam import scoring


def _trained(store, word, spam=0, ham=0):
    feature = store.intern(word)
    feature.spam_count = spam
    feature.ham_count = ham
    return feature


class TestInverseChiSquare:

    def test_zero_degrees_of_freedom(self):
        assert scoring.inverse_chi_square(0.0, 0) == 0.0

    def test_two_degrees_of_freedom_is_exponential(self):
        assert scoring.inverse_chi_square(3.0, 2) == pytest.approx(math.exp(-1.5))

    def test_four_degrees_of_freedom(self):
        m = 2.5
        expected = math.exp(-m) * (1 + m)
        assert scoring.inverse_chi_square(5.0, 4) == pytest.approx(expected)

    def test_never_exceeds_one(self):
        assert scoring.inverse_chi_square(0.0, 300) == 1.0
        assert scoring.inverse_chi_square(100.0, 300) <= 1.0

    @pytest.mark.parametrize("dof", [1, 3, -2])
    def test_odd_or_negative_degrees_of_freedom(self, dof):
        with pytest.raises(InvariantError):
            scoring.inverse_chi_square(1.0, dof)

    def test_invariant_error_is_an_assertion(self):
        assert issubclass(InvariantError, AssertionError)


class TestFisher:

    def test_empty(self):
        assert scoring.fisher([], 0) == 0.0

    def test_single_probability_is_itself(self):
        assert scoring.fisher([0.75], 1) == pytest.approx(0.75)


class TestWordProbabilities:

    def test_spam_probability_uses_frequencies(self, store):
        for _ in range(4):
            store.count_document(Label.HAM)
        store.count_document(Label.SPAM)
        feature = _trained(store, "offer", spam=1, ham=4)

        # Both frequencies are 1.0, so the word is neutral
        assert scoring.spam_probability(feature, store) == pytest.approx(0.5)

    def test_spam_probability_with_zero_totals(self, store):
        feature = _trained(store, "lisp", spam=1)
        assert scoring.spam_probability(feature, store) == 1.0

    def test_spam_probability_rejects_untrained(self, store):
        with pytest.raises(InvariantError):
            scoring.spam_probability(WordFeature("nothing"), store)

    def test_bayesian_smoothing(self, store):
        store.count_document(Label.SPAM)
        feature = _trained(store, "lisp", spam=1)
        assert scoring.bayesian_spam_probability(feature, store) == pytest.approx(0.75)

    def test_bayesian_smoothing_parameters(self, store):
        store.count_document(Label.SPAM)
        feature = _trained(store, "lisp", spam=1)
        p = scoring.bayesian_spam_probability(
            feature, store, assumed_probability=0.2, weight=3.0
        )
        assert p == pytest.approx((3.0 * 0.2 + 1.0) / 4.0)

    def test_more_evidence_moves_away_from_prior(self, store):
        for _ in range(10):
            store.count_document(Label.SPAM)
        weak = _trained(store, "weak", spam=1)
        strong = _trained(store, "strong", spam=10)
        assert (
            scoring.bayesian_spam_probability(strong, store)
            > scoring.bayesian_spam_probability(weak, store)
        )

    def test_is_untrained(self):
        assert scoring.is_untrained(WordFeature("abc"))
        assert not scoring.is_untrained(WordFeature("abc", ham_count=1))


class TestScore:

    def test_no_features_is_neutral(self, store):
        assert scoring.score([], store) == 0.5

    def test_untrained_features_are_ignored(self, store):
        features = [store.intern("one"), store.intern("two")]
        assert scoring.score(features, store) == 0.5

    def test_single_spam_word(self, store):
        store.count_document(Label.SPAM)
        feature = _trained(store, "lisp", spam=1)
        assert scoring.score([feature], store) == pytest.approx(0.75)

    def test_single_ham_word(self, store):
        store.count_document(Label.HAM)
        feature = _trained(store, "lisp", ham=1)
        assert scoring.score([feature], store) == pytest.approx(0.25)

    def test_score_stays_in_range(self, store):
        for _ in range(50):
            store.count_document(Label.SPAM)
        features = [_trained(store, f"word{chr(97 + i)}", spam=50) for i in range(20)]
        value = scoring.score(features, store)
        assert 0.0 <= value <= 1.0
        assert value > 0.99
